from tests.helpers.factories import (
    make_authorization_payload,
    make_capture_payload,
    make_config,
    make_error_payload,
    make_money,
    make_order_payload,
    make_plan_payload,
    make_refund_payload,
    make_subscription_payload,
    make_token_payload,
    make_webhook_body,
    make_webhook_event_payload,
    make_webhook_headers,
)
from tests.helpers.fakes import (
    FakeClock,
    FakePayPalApi,
    FakeSleep,
    FakeWebhooks,
    request_json,
)

__all__ = [
    "FakeClock",
    "FakePayPalApi",
    "FakeSleep",
    "FakeWebhooks",
    "make_authorization_payload",
    "make_capture_payload",
    "make_config",
    "make_error_payload",
    "make_money",
    "make_order_payload",
    "make_plan_payload",
    "make_refund_payload",
    "make_subscription_payload",
    "make_token_payload",
    "make_webhook_body",
    "make_webhook_event_payload",
    "make_webhook_headers",
    "request_json",
]
