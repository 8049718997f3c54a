from paypal_client.client import PayPal
from paypal_client.contracts import Environment, ErrorType
from paypal_client.core import (
    ConfigRegistry,
    PayPalAPIError,
    PayPalAuthenticationError,
    PayPalConfig,
    PayPalConnectionError,
    PayPalError,
    PayPalIdempotencyError,
    PayPalInvalidRequestError,
    PayPalRateLimitError,
    Settings,
    default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigRegistry",
    "Environment",
    "ErrorType",
    "PayPal",
    "PayPalAPIError",
    "PayPalAuthenticationError",
    "PayPalConfig",
    "PayPalConnectionError",
    "PayPalError",
    "PayPalIdempotencyError",
    "PayPalInvalidRequestError",
    "PayPalRateLimitError",
    "Settings",
    "default_registry",
]
