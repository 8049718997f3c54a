from paypal_client.observability.propagation import current_trace_id, inject_headers

__all__ = [
    "current_trace_id",
    "inject_headers",
]
