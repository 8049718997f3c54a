from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from paypal_client.constants import (
    WEBHOOK_EVENTS_PATH,
    WEBHOOK_TRANSMISSION_HEADERS,
    WEBHOOK_VERIFY_PATH,
)
from paypal_client.contracts import (
    VerificationStatus,
    VerifyWebhookSignatureRequest,
    VerifyWebhookSignatureResponse,
    WebhookEvent,
    WebhookEventList,
)
from paypal_client.core.errors import PayPalError, PayPalInvalidRequestError
from paypal_client.logging import (
    ERROR_TYPE,
    EVENT_TYPE,
    TRANSMISSION_ID,
    VERIFICATION_STATUS,
    WEBHOOK_ID,
    get_logger,
)
from paypal_client.resources.base import Resource
from paypal_client.utils import build_query, require_identifier

logger = get_logger(__name__)


def transmission_fields(headers: Mapping[str, str]) -> dict[str, str]:
    """Pick the PayPal transmission headers out of a received request.

    Lookup ignores header-name casing; absent headers become empty strings.
    """
    normalized = {str(name).lower(): value for name, value in headers.items()}
    return {
        field: normalized.get(header.lower(), "")
        for field, header in WEBHOOK_TRANSMISSION_HEADERS.items()
    }


class WebhooksResource(Resource):
    async def verify_signature(
        self,
        headers: Mapping[str, str],
        body: str | bytes,
        webhook_id: str | None = None,
    ) -> bool:
        """Ask PayPal whether a received webhook is authentic.

        Never raises for a failed or unreachable verification: any error is
        logged and reported as ``False``. A missing webhook id is a caller
        mistake and raises ``PayPalInvalidRequestError``.
        """
        resolved_webhook_id = self._resolve_webhook_id(webhook_id)
        fields = transmission_fields(headers)
        log_fields = {
            WEBHOOK_ID: resolved_webhook_id,
            TRANSMISSION_ID: fields["transmission_id"],
        }
        try:
            event = json.loads(body)
        except ValueError:
            logger.warning(
                "webhook_body_not_json",
                extra={"extra_fields": log_fields},
            )
            return False
        if not isinstance(event, dict):
            logger.warning("webhook_body_not_object", extra={"extra_fields": log_fields})
            return False

        request = VerifyWebhookSignatureRequest(
            **fields, webhook_id=resolved_webhook_id, webhook_event=event
        )
        try:
            data = await self._http.post(WEBHOOK_VERIFY_PATH, request.model_dump(mode="json"))
            verification = VerifyWebhookSignatureResponse.model_validate(data)
        except (PayPalError, httpx.HTTPError, ValidationError) as exc:
            logger.warning(
                "webhook_verification_failed",
                extra={"extra_fields": {**log_fields, ERROR_TYPE: type(exc).__name__}},
            )
            return False

        verified = verification.verification_status == VerificationStatus.SUCCESS
        if not verified:
            logger.warning(
                "webhook_signature_rejected",
                extra={
                    "extra_fields": {
                        **log_fields,
                        VERIFICATION_STATUS: verification.verification_status,
                    }
                },
            )
        return verified

    async def construct_event(
        self,
        body: str | bytes,
        headers: Mapping[str, str],
        webhook_id: str | None = None,
    ) -> WebhookEvent | None:
        """Return the verified event, or ``None`` when it cannot be trusted."""
        if not await self.verify_signature(headers, body, webhook_id):
            return None
        try:
            event = WebhookEvent.model_validate_json(body)
        except ValidationError as exc:
            logger.warning(
                "webhook_event_unparseable",
                extra={"extra_fields": {ERROR_TYPE: type(exc).__name__}},
            )
            return None
        logger.info(
            "webhook_event_verified",
            extra={"extra_fields": {EVENT_TYPE: event.event_type, "event_id": event.id}},
        )
        return event

    async def list_events(
        self,
        *,
        page_size: int | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
    ) -> WebhookEventList:
        query = build_query(page_size=page_size, start_time=start_time, end_time=end_time)
        data = await self._http.get(WEBHOOK_EVENTS_PATH, params=query)
        return WebhookEventList.model_validate(data or {})

    async def resend_event(self, event_id: str, webhook_ids: Sequence[str]) -> Any:
        event_segment = require_identifier(event_id, param="event_id")
        return await self._http.post(
            f"{WEBHOOK_EVENTS_PATH}/{event_segment}/resend",
            {"webhook_ids": list(webhook_ids)},
        )

    def _resolve_webhook_id(self, webhook_id: str | None) -> str:
        resolved = webhook_id or self._http.config.webhook_id
        if not resolved:
            raise PayPalInvalidRequestError(
                "A webhook id is required to verify webhook signatures", param="webhook_id"
            )
        return resolved
