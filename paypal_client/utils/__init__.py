from paypal_client.utils.query import build_query, to_payload, to_payload_list
from paypal_client.utils.validation import require_identifier

__all__ = [
    "build_query",
    "require_identifier",
    "to_payload",
    "to_payload_list",
]
