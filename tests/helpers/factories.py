from __future__ import annotations

import json
from typing import Any

from paypal_client.contracts import Environment
from paypal_client.core.config import PayPalConfig


def make_config(**overrides: Any) -> PayPalConfig:
    values: dict[str, Any] = {
        "client_id": "client-id",
        "client_secret": "client-secret",
        "environment": Environment.SANDBOX,
    }
    values.update(overrides)
    return PayPalConfig.model_validate(values)


def make_token_payload(*, access_token: str = "token-1", expires_in: int = 3600) -> dict[str, Any]:
    return {
        "scope": "https://uri.paypal.com/services/payments/payment",
        "access_token": access_token,
        "token_type": "Bearer",
        "app_id": "APP-80W284485P519543T",
        "expires_in": expires_in,
        "nonce": "2024-01-01T00:00:00Zabc",
    }


def make_error_payload(
    *,
    name: str = "RESOURCE_NOT_FOUND",
    message: str = "The specified resource does not exist.",
    debug_id: str | None = "abc",
    details: list[dict[str, str]] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"name": name, "message": message}
    if debug_id is not None:
        payload["debug_id"] = debug_id
    if details is not None:
        payload["details"] = details
    return payload


def make_money(value: str = "10.00", currency_code: str = "USD") -> dict[str, str]:
    return {"currency_code": currency_code, "value": value}


def make_link(href: str, rel: str = "self", method: str = "GET") -> dict[str, str]:
    return {"href": href, "rel": rel, "method": method}


def make_order_payload(*, order_id: str = "5O190127TN364715T", status: str = "CREATED") -> dict[str, Any]:
    return {
        "id": order_id,
        "status": status,
        "intent": "CAPTURE",
        "purchase_units": [{"reference_id": "default", "amount": make_money()}],
        "create_time": "2024-01-01T10:00:00Z",
        "links": [
            make_link(f"https://api.sandbox.paypal.com/v2/checkout/orders/{order_id}"),
            make_link(f"https://www.sandbox.paypal.com/checkoutnow?token={order_id}", "approve"),
        ],
    }


def make_capture_payload(*, capture_id: str = "2GG279541U471931P") -> dict[str, Any]:
    return {
        "id": capture_id,
        "status": "COMPLETED",
        "amount": make_money(),
        "final_capture": True,
        "seller_protection": {"status": "ELIGIBLE", "dispute_categories": ["ITEM_NOT_RECEIVED"]},
        "seller_receivable_breakdown": {
            "gross_amount": make_money(),
            "paypal_fee": make_money("0.64"),
            "net_amount": make_money("9.36"),
        },
        "create_time": "2024-01-01T10:05:00Z",
        "update_time": "2024-01-01T10:05:00Z",
        "links": [],
    }


def make_refund_payload(*, refund_id: str = "1JU08902781691411") -> dict[str, Any]:
    return {"id": refund_id, "status": "COMPLETED", "amount": make_money("5.00"), "links": []}


def make_authorization_payload(*, authorization_id: str = "0VF52814937998046") -> dict[str, Any]:
    return {
        "id": authorization_id,
        "status": "CREATED",
        "amount": make_money(),
        "expiration_time": "2024-01-30T10:00:00Z",
        "links": [],
    }


def make_plan_payload(*, plan_id: str = "P-5ML4271244454362WXNWU5NQ", status: str = "ACTIVE") -> dict[str, Any]:
    return {
        "id": plan_id,
        "product_id": "PROD-XXCD1234QWER65782",
        "name": "Video Streaming Service Plan",
        "status": status,
        "billing_cycles": [
            {
                "frequency": {"interval_unit": "MONTH", "interval_count": 1},
                "tenure_type": "REGULAR",
                "sequence": 1,
                "total_cycles": 12,
                "pricing_scheme": {"fixed_price": make_money()},
            }
        ],
        "create_time": "2024-01-01T10:00:00Z",
        "links": [],
    }


def make_subscription_payload(
    *, subscription_id: str = "I-BW452GLLEP1G", status: str = "ACTIVE"
) -> dict[str, Any]:
    return {
        "id": subscription_id,
        "plan_id": "P-5ML4271244454362WXNWU5NQ",
        "status": status,
        "status_update_time": "2024-01-01T10:00:00Z",
        "billing_info": {
            "outstanding_balance": make_money("0.00"),
            "cycle_executions": [
                {"tenure_type": "REGULAR", "sequence": 1, "cycles_completed": 1}
            ],
            "failed_payments_count": 0,
        },
        "links": [],
    }


def make_webhook_event_payload(
    *, event_id: str = "WH-2WR32451HC0233532-67976317FL4543714"
) -> dict[str, Any]:
    return {
        "id": event_id,
        "event_version": "1.0",
        "create_time": "2024-01-01T10:00:00Z",
        "resource_type": "capture",
        "resource_version": "2.0",
        "event_type": "PAYMENT.CAPTURE.COMPLETED",
        "summary": "Payment completed for $ 10.0 USD",
        "resource": {"id": "2GG279541U471931P", "status": "COMPLETED"},
        "links": [],
    }


def make_webhook_body(**overrides: Any) -> str:
    return json.dumps(make_webhook_event_payload(**overrides))


def make_webhook_headers(*, upper_case: bool = False) -> dict[str, str]:
    headers = {
        "paypal-auth-algo": "SHA256withRSA",
        "paypal-cert-url": "https://api.sandbox.paypal.com/v1/notifications/certs/CERT-1",
        "paypal-transmission-id": "69cd13f0-d67a-11e5-baa3-778b53f4ae55",
        "paypal-transmission-sig": "lmI95Jx3Y9nhR5SJWlHVIWpg4AgFk7n9bCHSRxbrd8A9zrhdu2rMyFrmz",
        "paypal-transmission-time": "2024-01-01T10:00:00Z",
    }
    if upper_case:
        return {name.upper(): value for name, value in headers.items()}
    return headers
