from __future__ import annotations

ENVIRONMENT = "environment"
HTTP_METHOD = "http_method"
PATH = "path"
STATUS_CODE = "status_code"
ATTEMPT = "attempt"
DELAY_MS = "delay_ms"
ERROR_CODE = "error_code"
ERROR_TYPE = "error_type"
DEBUG_ID = "debug_id"
REQUEST_ID = "paypal_request_id"
TRACE_ID = "trace_id"
WEBHOOK_ID = "webhook_id"
TRANSMISSION_ID = "transmission_id"
EVENT_TYPE = "event_type"
VERIFICATION_STATUS = "verification_status"
