from fastapi import HTTPException, Request

from paypal_client.constants import TRANSMISSION_ID_HEADER
from paypal_client.contracts import WebhookEvent
from paypal_client.logging import (
    TRACE_ID,
    TRANSMISSION_ID,
    clear_correlation_context,
    get_logger,
    set_correlation_context,
)
from paypal_client.observability import current_trace_id
from paypal_client.resources import WebhooksResource

logger = get_logger(__name__)


class VerifiedWebhookEvent:
    """FastAPI dependency yielding a PayPal webhook event that passed verification.

    Usage::

        verified_event = VerifiedWebhookEvent(paypal.webhooks)

        @router.post("/webhooks/paypal")
        async def receive(event: Annotated[WebhookEvent, Depends(verified_event)]) -> None:
            ...

    Requests that fail verification are answered with 400.
    """

    def __init__(self, webhooks: WebhooksResource, webhook_id: str | None = None) -> None:
        self._webhooks = webhooks
        self._webhook_id = webhook_id

    async def __call__(self, request: Request) -> WebhookEvent:
        body = await request.body()
        set_correlation_context(
            {
                TRACE_ID: current_trace_id(),
                TRANSMISSION_ID: request.headers.get(TRANSMISSION_ID_HEADER, ""),
            }
        )
        try:
            event = await self._webhooks.construct_event(
                body, request.headers, self._webhook_id
            )
            if event is None:
                logger.warning("webhook_request_rejected")
                raise HTTPException(status_code=400, detail="Invalid webhook signature")
            return event
        finally:
            clear_correlation_context()
