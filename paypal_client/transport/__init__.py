from paypal_client.transport.http_client import HttpClient
from paypal_client.transport.pipeline import RequestContext, compose
from paypal_client.transport.token import (
    TOKEN_EXPIRY_MARGIN_MS,
    AccessToken,
    ClientCredentialsTokenProvider,
    TokenResponse,
)

__all__ = [
    "TOKEN_EXPIRY_MARGIN_MS",
    "AccessToken",
    "ClientCredentialsTokenProvider",
    "HttpClient",
    "RequestContext",
    "TokenResponse",
    "compose",
]
