from __future__ import annotations

import pytest

from paypal_client import ConfigRegistry, Environment, PayPal, PayPalInvalidRequestError, Settings
from paypal_client.resources import (
    OrdersResource,
    PaymentsResource,
    PlansResource,
    SubscriptionsResource,
    WebhooksResource,
)
from tests.helpers import FakePayPalApi, make_order_payload


def test_resources_share_one_transport() -> None:
    paypal = PayPal(client_id="client-id", client_secret="secret", environment="sandbox")

    assert isinstance(paypal.orders, OrdersResource)
    assert isinstance(paypal.payments, PaymentsResource)
    assert isinstance(paypal.plans, PlansResource)
    assert isinstance(paypal.subscriptions, SubscriptionsResource)
    assert isinstance(paypal.webhooks, WebhooksResource)
    resources = [paypal.orders, paypal.payments, paypal.plans, paypal.subscriptions, paypal.webhooks]
    assert all(resource._http is paypal.http_client for resource in resources)


def test_create_accepts_mapping_config() -> None:
    paypal = PayPal.create(
        {"client_id": "client-id", "client_secret": "secret", "environment": "live"}
    )

    assert paypal.config.environment == Environment.LIVE
    assert paypal.http_client.base_url == "https://api.paypal.com"


def test_default_config_fills_missing_options_for_later_clients() -> None:
    before = PayPal(client_id="client-id", client_secret="secret", environment="sandbox")

    PayPal.set_default_config(environment="live", timeout_ms=5_000)
    after = PayPal(client_id="client-id", client_secret="secret")

    assert before.config.environment == Environment.SANDBOX
    assert after.config.environment == Environment.LIVE
    assert after.config.resolved_timeout_ms == 5_000


def test_explicit_options_win_over_default_config() -> None:
    PayPal.set_default_config(environment="live", max_retries=4)

    paypal = PayPal(
        {"client_id": "client-id", "client_secret": "secret"}, environment="sandbox"
    )

    assert paypal.config.environment == Environment.SANDBOX
    assert paypal.config.resolved_max_retries == 4


def test_registry_argument_replaces_default_registry() -> None:
    PayPal.set_default_config(environment="live")
    registry = ConfigRegistry(environment="sandbox", webhook_id="WH-1")

    paypal = PayPal(client_id="client-id", client_secret="secret", registry=registry)

    assert paypal.config.environment == Environment.SANDBOX
    assert paypal.config.webhook_id == "WH-1"


def test_missing_credentials_raise_invalid_request_error() -> None:
    with pytest.raises(PayPalInvalidRequestError) as exc_info:
        PayPal(environment="sandbox")

    assert exc_info.value.param == "client_id"


def test_unknown_default_option_is_rejected() -> None:
    with pytest.raises(PayPalInvalidRequestError):
        PayPal.set_default_config(sandbox=True)


def test_from_env_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYPAL_CLIENT_ID", "env-id")
    monkeypatch.setenv("PAYPAL_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("PAYPAL_ENVIRONMENT", "live")
    monkeypatch.setenv("PAYPAL_WEBHOOK_ID", "WH-ENV")

    paypal = PayPal.from_env(Settings(_env_file=None))

    assert paypal.config.client_id == "env-id"
    assert paypal.config.environment == Environment.LIVE
    assert paypal.config.webhook_id == "WH-ENV"


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport() -> None:
    api = FakePayPalApi().queue_json("GET", "/v2/checkout/orders/ORDER-1", make_order_payload())

    async with PayPal(
        client_id="client-id",
        client_secret="secret",
        environment="sandbox",
        transport=api.transport,
    ) as paypal:
        await paypal.orders.retrieve("ORDER-1")

    with pytest.raises(RuntimeError):
        await paypal.orders.retrieve("ORDER-1")
