from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

import httpx
from pydantic import BaseModel, ValidationError

from paypal_client.constants import TOKEN_PATH
from paypal_client.core.errors import PayPalAuthenticationError, PayPalConnectionError
from paypal_client.core.metrics import token_refreshes
from paypal_client.logging import ENVIRONMENT, STATUS_CODE, get_logger

logger = get_logger(__name__)

TOKEN_EXPIRY_MARGIN_MS = 30_000
_REJECTED_CREDENTIAL_STATUSES = {400, 401}

Clock = Callable[[], float]


def now_ms() -> float:
    return time.time() * 1000


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at_ms: float

    def is_valid(self, at_ms: float) -> bool:
        return at_ms < self.expires_at_ms - TOKEN_EXPIRY_MARGIN_MS


class TokenResponse(BaseModel):
    access_token: str
    token_type: str
    expires_in: int
    scope: str | None = None
    nonce: str | None = None
    app_id: str | None = None


class ClientCredentialsTokenProvider:
    """OAuth2 client-credentials token cache for a single transport.

    The cached token is replaced wholesale on every refresh. Concurrent callers
    that all observe an expired token each fetch a new one; PayPal accepts
    concurrent issuance, so no lock is taken.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        client_id: str,
        client_secret: str,
        *,
        clock: Clock = now_ms,
        environment: str = "",
    ) -> None:
        self._http_client = http_client
        self._credentials = (client_id, client_secret)
        self._clock = clock
        self._environment = environment
        self._token: AccessToken | None = None

    @property
    def current(self) -> AccessToken | None:
        return self._token

    def has_valid_token(self) -> bool:
        return self._token is not None and self._token.is_valid(self._clock())

    async def ensure_valid(self) -> str:
        token = self._token
        if token is None or not token.is_valid(self._clock()):
            return await self.refresh()
        return token.value

    async def refresh(self) -> str:
        try:
            response = await self._http_client.post(
                TOKEN_PATH,
                data={"grant_type": "client_credentials"},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                auth=self._credentials,
            )
            response.raise_for_status()
            payload = TokenResponse.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning(
                "paypal_token_request_rejected",
                extra={
                    "extra_fields": {ENVIRONMENT: self._environment, STATUS_CODE: status_code}
                },
            )
            if status_code in _REJECTED_CREDENTIAL_STATUSES:
                raise PayPalAuthenticationError() from exc
            raise PayPalConnectionError("Failed to authenticate with PayPal", exc) from exc
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            raise PayPalConnectionError("Failed to authenticate with PayPal", exc) from exc

        issued_at = self._clock()
        self._token = AccessToken(
            value=payload.access_token,
            expires_at_ms=issued_at + payload.expires_in * 1000,
        )
        token_refreshes.add(1, {"environment": self._environment})
        logger.info(
            "paypal_token_refreshed",
            extra={
                "extra_fields": {
                    ENVIRONMENT: self._environment,
                    "expires_in": payload.expires_in,
                }
            },
        )
        return payload.access_token
