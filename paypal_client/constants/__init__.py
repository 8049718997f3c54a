from paypal_client.constants.endpoints import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_MS,
    ORDERS_PATH,
    PAYMENTS_PATH,
    PLANS_PATH,
    SUBSCRIPTIONS_PATH,
    TOKEN_PATH,
    WEBHOOK_EVENTS_PATH,
    WEBHOOK_VERIFY_PATH,
    base_url_for_environment,
    get_environment_profile,
    supported_environments,
)
from paypal_client.constants.headers import (
    REQUEST_ID_HEADER,
    TRANSMISSION_ID_HEADER,
    WEBHOOK_TRANSMISSION_HEADERS,
)

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT_MS",
    "ORDERS_PATH",
    "PAYMENTS_PATH",
    "PLANS_PATH",
    "REQUEST_ID_HEADER",
    "SUBSCRIPTIONS_PATH",
    "TOKEN_PATH",
    "TRANSMISSION_ID_HEADER",
    "WEBHOOK_EVENTS_PATH",
    "WEBHOOK_TRANSMISSION_HEADERS",
    "WEBHOOK_VERIFY_PATH",
    "base_url_for_environment",
    "get_environment_profile",
    "supported_environments",
]
