from __future__ import annotations

from typing import Any
from urllib.parse import quote

from paypal_client.core.errors import PayPalInvalidRequestError

_MAX_IDENTIFIER_LENGTH = 128


def _normalize_text(value: Any, *, param: str) -> str:
    if value is None or not isinstance(value, str):
        raise PayPalInvalidRequestError(f"Missing required {param}", param=param)
    normalized = value.strip()
    if not normalized:
        raise PayPalInvalidRequestError(f"Missing required {param}", param=param)
    return normalized


def require_identifier(value: Any, *, param: str) -> str:
    """Validate a resource id and return it quoted for use as a path segment."""
    normalized = _normalize_text(value, param=param)
    if len(normalized) > _MAX_IDENTIFIER_LENGTH:
        raise PayPalInvalidRequestError(f"Identifier too long: {param}", param=param)
    return quote(normalized, safe="")
