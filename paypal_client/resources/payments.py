from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paypal_client.constants import PAYMENTS_PATH
from paypal_client.contracts import (
    Authorization,
    Capture,
    CaptureAuthorizationRequest,
    ReauthorizeRequest,
    Refund,
    RefundCaptureRequest,
)
from paypal_client.resources.base import Resource, request_id_headers
from paypal_client.utils import require_identifier, to_payload


class PaymentsResource(Resource):
    async def get_capture(self, capture_id: str) -> Capture:
        data = await self._http.get(self._capture_path(capture_id))
        return Capture.model_validate(data)

    async def refund_capture(
        self,
        capture_id: str,
        params: RefundCaptureRequest | Mapping[str, Any] | None = None,
        *,
        request_id: str | None = None,
    ) -> Refund:
        """Refund a captured payment; omit ``params`` for a full refund."""
        data = await self._http.post(
            f"{self._capture_path(capture_id)}/refund",
            to_payload(params),
            headers=request_id_headers(request_id),
        )
        return Refund.model_validate(data)

    async def get_refund(self, refund_id: str) -> Refund:
        refund_segment = require_identifier(refund_id, param="refund_id")
        data = await self._http.get(f"{PAYMENTS_PATH}/refunds/{refund_segment}")
        return Refund.model_validate(data)

    async def get_authorization(self, authorization_id: str) -> Authorization:
        data = await self._http.get(self._authorization_path(authorization_id))
        return Authorization.model_validate(data)

    async def capture_authorization(
        self,
        authorization_id: str,
        params: CaptureAuthorizationRequest | Mapping[str, Any] | None = None,
    ) -> Capture:
        data = await self._http.post(
            f"{self._authorization_path(authorization_id)}/capture", to_payload(params)
        )
        return Capture.model_validate(data)

    async def reauthorize(
        self, authorization_id: str, params: ReauthorizeRequest | Mapping[str, Any]
    ) -> Authorization:
        data = await self._http.post(
            f"{self._authorization_path(authorization_id)}/reauthorize", to_payload(params)
        )
        return Authorization.model_validate(data)

    async def void_authorization(self, authorization_id: str) -> None:
        await self._http.post(f"{self._authorization_path(authorization_id)}/void")

    def _capture_path(self, capture_id: str) -> str:
        return f"{PAYMENTS_PATH}/captures/{require_identifier(capture_id, param='capture_id')}"

    def _authorization_path(self, authorization_id: str) -> str:
        segment = require_identifier(authorization_id, param="authorization_id")
        return f"{PAYMENTS_PATH}/authorizations/{segment}"
