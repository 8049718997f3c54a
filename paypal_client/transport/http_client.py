from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from paypal_client.constants import REQUEST_ID_HEADER
from paypal_client.core.config import PayPalConfig
from paypal_client.core.errors import PayPalConnectionError, api_error_from_payload
from paypal_client.core.metrics import request_errors, request_latency, request_retries
from paypal_client.logging import (
    ATTEMPT,
    DEBUG_ID,
    DELAY_MS,
    ERROR_CODE,
    ERROR_TYPE,
    HTTP_METHOD,
    PATH,
    REQUEST_ID,
    STATUS_CODE,
    get_logger,
)
from paypal_client.observability import inject_headers
from paypal_client.resilience import exponential_backoff
from paypal_client.transport.pipeline import Handler, RequestContext, compose
from paypal_client.transport.token import ClientCredentialsTokenProvider, Clock, now_ms

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]

_DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}
_RETRY_BASE_SECONDS = 1.0
_RETRY_CAP_SECONDS = 10.0


class HttpClient:
    """Single outbound channel to the PayPal REST API.

    Every call runs through the same pipeline, outermost first: error
    translation, transient-failure backoff retry, 401 refresh-and-replay,
    bearer token injection, send. Replays re-enter below the middleware that
    issued them, so a replayed request gets a fresh token header and is still
    translated on the way out.

    The 401 replay and the transient retries draw on separate budgets of the
    same logical call: at most one refresh-and-replay, and at most
    ``config.resolved_max_retries`` backoff replays.
    """

    def __init__(
        self,
        config: PayPalConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock = now_ms,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._config = config
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.resolved_timeout_ms / 1000,
            headers=_DEFAULT_HEADERS,
            transport=transport,
        )
        self._tokens = ClientCredentialsTokenProvider(
            self._client,
            config.client_id,
            config.client_secret.get_secret_value(),
            clock=clock,
            environment=config.environment.value,
        )
        self._dispatch: Handler = compose(
            [
                self._translate_errors,
                self._retry_transient,
                self._refresh_on_unauthorized,
                self._inject_auth,
            ],
            self._send,
        )

    @property
    def config(self) -> PayPalConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        ctx = RequestContext(
            method=method,
            path=path,
            json=json,
            params=params or None,
            headers=dict(headers or {}),
        )
        response = await self._dispatch(ctx)
        return _parse_body(response)

    async def get(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, json=json, params=params, headers=headers)

    async def patch(
        self,
        path: str,
        json: Any = None,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("PATCH", path, json=json, params=params, headers=headers)

    async def put(
        self,
        path: str,
        json: Any = None,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("PUT", path, json=json, params=params, headers=headers)

    async def delete(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("DELETE", path, params=params, headers=headers)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def _translate_errors(self, ctx: RequestContext, call_next: Handler) -> httpx.Response:
        try:
            response = await call_next(ctx)
        except (httpx.TimeoutException, httpx.ConnectError) as exc:
            self._record_failure(ctx, error_type=type(exc).__name__)
            raise PayPalConnectionError("Network error occurred", exc) from exc

        if response.status_code < 400:
            return response
        if not response.content:
            self._record_failure(ctx, error_type="HTTPStatusError", status_code=response.status_code)
            response.raise_for_status()
        error = api_error_from_payload(_safe_json(response), response.status_code)
        self._record_failure(
            ctx,
            error_type=type(error).__name__,
            status_code=error.http_status_code,
            code=error.code,
            debug_id=error.debug_id,
        )
        raise error

    async def _retry_transient(self, ctx: RequestContext, call_next: Handler) -> httpx.Response:
        while True:
            try:
                response = await call_next(ctx)
            except httpx.TransportError as exc:
                if not self._can_retry_transient(ctx):
                    raise
                await self._backoff(ctx, type(exc).__name__)
                continue
            if not _is_transient_status(response.status_code):
                return response
            if not self._can_retry_transient(ctx):
                return response
            await self._backoff(ctx, str(response.status_code))

    async def _refresh_on_unauthorized(
        self, ctx: RequestContext, call_next: Handler
    ) -> httpx.Response:
        response = await call_next(ctx)
        if response.status_code != 401 or ctx.auth_replayed:
            return response
        ctx.auth_replayed = True
        logger.info(
            "paypal_unauthorized_replay",
            extra={"extra_fields": {HTTP_METHOD: ctx.method, PATH: ctx.path}},
        )
        await self._tokens.refresh()
        request_retries.add(1, {"reason": "unauthorized"})
        return await call_next(ctx)

    async def _inject_auth(self, ctx: RequestContext, call_next: Handler) -> httpx.Response:
        token = await self._tokens.ensure_valid()
        ctx.headers["Authorization"] = f"Bearer {token}"
        return await call_next(ctx)

    async def _send(self, ctx: RequestContext) -> httpx.Response:
        headers = inject_headers(dict(ctx.headers))
        start = time.perf_counter()
        response = await self._client.request(
            ctx.method, ctx.path, json=ctx.json, params=ctx.params, headers=headers
        )
        duration_ms = (time.perf_counter() - start) * 1000
        request_latency.record(
            duration_ms, {"method": ctx.method, "status_code": response.status_code}
        )
        return response

    def _can_retry_transient(self, ctx: RequestContext) -> bool:
        return ctx.transient_attempts < self._config.resolved_max_retries

    async def _backoff(self, ctx: RequestContext, reason: str) -> None:
        delay = exponential_backoff(
            ctx.transient_attempts,
            base_seconds=_RETRY_BASE_SECONDS,
            cap_seconds=_RETRY_CAP_SECONDS,
        )
        logger.warning(
            "paypal_request_retry",
            extra={
                "extra_fields": {
                    HTTP_METHOD: ctx.method,
                    PATH: ctx.path,
                    ATTEMPT: ctx.transient_attempts + 1,
                    DELAY_MS: int(delay * 1000),
                    ERROR_TYPE: reason,
                    REQUEST_ID: ctx.headers.get(REQUEST_ID_HEADER, ""),
                }
            },
        )
        request_retries.add(1, {"reason": "transient"})
        await self._sleep(delay)
        ctx.transient_attempts += 1

    def _record_failure(
        self,
        ctx: RequestContext,
        *,
        error_type: str,
        status_code: int | None = None,
        code: str | None = None,
        debug_id: str | None = None,
    ) -> None:
        request_errors.add(1, {"method": ctx.method, "error": error_type})
        logger.warning(
            "paypal_request_failed",
            extra={
                "extra_fields": {
                    HTTP_METHOD: ctx.method,
                    PATH: ctx.path,
                    STATUS_CODE: status_code,
                    ERROR_TYPE: error_type,
                    ERROR_CODE: code,
                    DEBUG_ID: debug_id,
                }
            },
        )


def _is_transient_status(status_code: int) -> bool:
    return status_code >= 500 or status_code == 429


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    return _safe_json(response)
