from __future__ import annotations

from typing import Any

import httpx

from paypal_client.core.config import (
    ConfigInput,
    ConfigRegistry,
    PayPalConfig,
    Settings,
    default_registry,
    get_settings,
)
from paypal_client.resources import (
    OrdersResource,
    PaymentsResource,
    PlansResource,
    SubscriptionsResource,
    WebhooksResource,
)
from paypal_client.transport import HttpClient


class PayPal:
    """Entry point: one transport shared by every resource family.

    Configuration is resolved once, at construction, from ``registry``
    defaults (``default_registry`` unless given), then ``config``, then
    keyword ``options``.
    """

    def __init__(
        self,
        config: ConfigInput = None,
        *,
        registry: ConfigRegistry | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> None:
        resolved = (registry or default_registry).resolve(config, **options)
        self._http_client = HttpClient(resolved, transport=transport)

        self.orders = OrdersResource(self._http_client)
        self.payments = PaymentsResource(self._http_client)
        self.plans = PlansResource(self._http_client)
        self.subscriptions = SubscriptionsResource(self._http_client)
        self.webhooks = WebhooksResource(self._http_client)

    @classmethod
    def create(cls, config: ConfigInput = None, **kwargs: Any) -> PayPal:
        return cls(config, **kwargs)

    @classmethod
    def from_env(cls, settings: Settings | None = None, **kwargs: Any) -> PayPal:
        settings = settings or get_settings()
        return cls(settings.client_options(), **kwargs)

    @staticmethod
    def set_default_config(**values: Any) -> None:
        default_registry.set_defaults(**values)

    @property
    def config(self) -> PayPalConfig:
        return self._http_client.config

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def __aenter__(self) -> PayPal:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()
