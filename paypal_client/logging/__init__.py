from paypal_client.logging.fields import (
    ATTEMPT,
    DEBUG_ID,
    DELAY_MS,
    ENVIRONMENT,
    ERROR_CODE,
    ERROR_TYPE,
    EVENT_TYPE,
    HTTP_METHOD,
    PATH,
    REQUEST_ID,
    STATUS_CODE,
    TRACE_ID,
    TRANSMISSION_ID,
    VERIFICATION_STATUS,
    WEBHOOK_ID,
)
from paypal_client.logging.logger import (
    JsonFormatter,
    clear_correlation_context,
    configure_logging,
    get_correlation_context,
    get_logger,
    set_correlation_context,
    update_correlation_context,
)

__all__ = [
    "ATTEMPT",
    "DEBUG_ID",
    "DELAY_MS",
    "ENVIRONMENT",
    "ERROR_CODE",
    "ERROR_TYPE",
    "EVENT_TYPE",
    "HTTP_METHOD",
    "JsonFormatter",
    "PATH",
    "REQUEST_ID",
    "STATUS_CODE",
    "TRACE_ID",
    "TRANSMISSION_ID",
    "VERIFICATION_STATUS",
    "WEBHOOK_ID",
    "clear_correlation_context",
    "configure_logging",
    "get_correlation_context",
    "get_logger",
    "set_correlation_context",
    "update_correlation_context",
]
