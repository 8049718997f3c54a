from paypal_client.core.config import (
    ConfigRegistry,
    PayPalConfig,
    Settings,
    default_registry,
    get_settings,
)
from paypal_client.core.errors import (
    PayPalAPIError,
    PayPalAuthenticationError,
    PayPalConnectionError,
    PayPalError,
    PayPalIdempotencyError,
    PayPalInvalidRequestError,
    PayPalRateLimitError,
)

__all__ = [
    "ConfigRegistry",
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
    "get_settings",
]
