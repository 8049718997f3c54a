from __future__ import annotations

from typing import Any

import httpx
import pytest

from paypal_client.contracts import Environment, ErrorType
from paypal_client.core.errors import PayPalAPIError
from paypal_client.transport import HttpClient
from tests.helpers import (
    FakeClock,
    FakePayPalApi,
    FakeSleep,
    make_config,
    make_error_payload,
    request_json,
)

ORDER_PATH = "/v2/checkout/orders/ORDER-1"


def _client(api: FakePayPalApi, **overrides: Any) -> HttpClient:
    return HttpClient(
        make_config(**overrides), transport=api.transport, clock=FakeClock(), sleep=FakeSleep()
    )


@pytest.mark.asyncio
async def test_error_payload_becomes_api_error() -> None:
    details = [{"issue": "INVALID_RESOURCE_ID", "description": "Specified resource ID does not exist."}]
    api = FakePayPalApi().queue(
        "GET",
        ORDER_PATH,
        httpx.Response(
            404,
            json=make_error_payload(
                name="RESOURCE_NOT_FOUND", message="Not found", debug_id="abc", details=details
            ),
        ),
    )

    with pytest.raises(PayPalAPIError) as exc_info:
        await _client(api).get(ORDER_PATH)

    error = exc_info.value
    assert error.type == ErrorType.API_ERROR
    assert error.http_status_code == 404
    assert error.code == "RESOURCE_NOT_FOUND"
    assert error.message == "Not found"
    assert error.debug_id == "abc"
    assert [detail.issue for detail in error.details] == ["INVALID_RESOURCE_ID"]


@pytest.mark.asyncio
async def test_non_json_error_body_uses_generic_api_error() -> None:
    api = FakePayPalApi().queue(
        "GET", ORDER_PATH, httpx.Response(422, text="<html>Unprocessable</html>")
    )

    with pytest.raises(PayPalAPIError) as exc_info:
        await _client(api).get(ORDER_PATH)

    assert exc_info.value.message == "PayPal API Error"
    assert exc_info.value.code == "UNKNOWN_ERROR"
    assert exc_info.value.http_status_code == 422


@pytest.mark.asyncio
async def test_error_without_body_propagates_http_status_error() -> None:
    api = FakePayPalApi().queue("GET", ORDER_PATH, httpx.Response(404))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await _client(api).get(ORDER_PATH)

    assert exc_info.value.response.status_code == 404


@pytest.mark.asyncio
async def test_empty_success_body_returns_none() -> None:
    api = FakePayPalApi().queue("PATCH", ORDER_PATH, httpx.Response(204))

    result = await _client(api).patch(ORDER_PATH, [{"op": "replace", "path": "/intent"}])

    assert result is None
    assert request_json(api.last_api_request()) == [{"op": "replace", "path": "/intent"}]


@pytest.mark.asyncio
async def test_caller_headers_and_params_are_forwarded() -> None:
    api = FakePayPalApi().queue_json("GET", ORDER_PATH, {"id": "ORDER-1"})

    await _client(api).get(
        ORDER_PATH, params={"fields": "payment_source"}, headers={"PayPal-Request-Id": "req-1"}
    )

    request = api.last_api_request()
    assert request.headers["PayPal-Request-Id"] == "req-1"
    assert request.headers["Content-Type"] == "application/json"
    assert dict(request.url.params) == {"fields": "payment_source"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("environment", "host"),
    [
        (Environment.SANDBOX, "api.sandbox.paypal.com"),
        (Environment.LIVE, "api.paypal.com"),
    ],
)
async def test_environment_selects_api_host(environment: Environment, host: str) -> None:
    api = FakePayPalApi().queue_json("GET", ORDER_PATH, {"id": "ORDER-1"})
    client = _client(api, environment=environment)

    await client.get(ORDER_PATH)

    assert client.base_url == f"https://{host}"
    assert {request.url.host for request in api.requests} == {host}


@pytest.mark.asyncio
async def test_aclose_closes_underlying_client() -> None:
    api = FakePayPalApi()

    async with _client(api) as client:
        pass

    with pytest.raises(RuntimeError):
        await client.get(ORDER_PATH)
