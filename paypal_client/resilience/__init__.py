from paypal_client.resilience.backoff import exponential_backoff

__all__ = [
    "exponential_backoff",
]
