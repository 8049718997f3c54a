from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("paypal-client")
request_latency = meter.create_histogram(
    "paypal_client_request_latency_ms", description="PayPal API call latency"
)
request_retries = meter.create_counter(
    "paypal_client_request_retries", description="Replays of PayPal API calls"
)
request_errors = meter.create_counter(
    "paypal_client_request_errors", description="PayPal API calls that ended in an error"
)
token_refreshes = meter.create_counter(
    "paypal_client_token_refreshes", description="OAuth2 access token fetches"
)
