from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from paypal_client.contracts.common import ErrorDetail
from paypal_client.contracts.enums import ErrorType

UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"


@dataclass(eq=False)
class PayPalError(Exception):
    type: ErrorType
    message: str

    def __str__(self) -> str:
        return self.message


class PayPalAPIError(PayPalError):
    """PayPal answered with an error payload."""

    def __init__(
        self,
        message: str,
        http_status_code: int,
        code: str = UNKNOWN_ERROR_CODE,
        debug_id: str | None = None,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.http_status_code = http_status_code
        self.code = code
        self.debug_id = debug_id
        self.details = details or []
        super().__init__(ErrorType.API_ERROR, message)


class PayPalConnectionError(PayPalError):
    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        self.original_error = original_error
        super().__init__(ErrorType.CONNECTION_ERROR, message)


class PayPalAuthenticationError(PayPalError):
    def __init__(self, message: str = "Invalid PayPal credentials") -> None:
        super().__init__(ErrorType.AUTHENTICATION_ERROR, message)


class PayPalInvalidRequestError(PayPalError):
    def __init__(self, message: str, param: str | None = None) -> None:
        self.param = param
        super().__init__(ErrorType.INVALID_REQUEST_ERROR, message)


class PayPalIdempotencyError(PayPalError):
    def __init__(self, message: str = "Idempotency key already used") -> None:
        super().__init__(ErrorType.IDEMPOTENCY_ERROR, message)


class PayPalRateLimitError(PayPalError):
    def __init__(self, message: str = "Too many requests made to PayPal API") -> None:
        super().__init__(ErrorType.RATE_LIMIT_ERROR, message)


def api_error_from_payload(payload: Any, http_status_code: int) -> PayPalAPIError:
    """Build an ``api_error`` from a PayPal error body.

    PayPal error bodies look like ``{"name", "message", "debug_id", "details"}``;
    anything else (an HTML error page, a bare string) still yields an
    ``api_error`` with the generic message and ``UNKNOWN_ERROR`` code.
    """
    if not isinstance(payload, dict):
        return PayPalAPIError("PayPal API Error", http_status_code)
    details = [
        ErrorDetail.model_validate(item)
        for item in payload.get("details") or []
        if isinstance(item, dict) and "issue" in item
    ]
    return PayPalAPIError(
        payload.get("message") or "PayPal API Error",
        http_status_code,
        payload.get("name") or payload.get("error") or UNKNOWN_ERROR_CODE,
        payload.get("debug_id"),
        details,
    )
