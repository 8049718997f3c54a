from __future__ import annotations

from datetime import datetime
from typing import Any

from paypal_client.contracts.common import Link, PayPalModel


class WebhookEvent(PayPalModel):
    id: str
    event_version: str | None = None
    create_time: datetime | None = None
    resource_type: str | None = None
    resource_version: str | None = None
    event_type: str
    summary: str | None = None
    # Shape depends on event_type; PayPal defines it per event.
    resource: dict[str, Any] = {}
    links: list[Link] = []


class WebhookEventList(PayPalModel):
    events: list[WebhookEvent] = []
    count: int | None = None
    links: list[Link] = []


class VerifyWebhookSignatureRequest(PayPalModel):
    auth_algo: str
    cert_url: str
    transmission_id: str
    transmission_sig: str
    transmission_time: str
    webhook_id: str
    webhook_event: dict[str, Any]


class VerifyWebhookSignatureResponse(PayPalModel):
    verification_status: str
