from __future__ import annotations

from paypal_client.constants import REQUEST_ID_HEADER
from paypal_client.transport import HttpClient


class Resource:
    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client


def request_id_headers(request_id: str | None) -> dict[str, str] | None:
    if request_id is None:
        return None
    return {REQUEST_ID_HEADER: request_id}
