from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from paypal_client.constants import ORDERS_PATH
from paypal_client.contracts import (
    CreateOrderRequest,
    Order,
    OrderPaymentRequest,
    PatchOperation,
)
from paypal_client.resources.base import Resource, request_id_headers
from paypal_client.utils import require_identifier, to_payload, to_payload_list

OrderBody = OrderPaymentRequest | Mapping[str, Any]


class OrdersResource(Resource):
    async def create(
        self,
        params: CreateOrderRequest | Mapping[str, Any],
        *,
        request_id: str | None = None,
    ) -> Order:
        data = await self._http.post(
            ORDERS_PATH, to_payload(params), headers=request_id_headers(request_id)
        )
        return Order.model_validate(data)

    async def retrieve(self, order_id: str) -> Order:
        data = await self._http.get(self._path(order_id))
        return Order.model_validate(data)

    async def update(
        self, order_id: str, operations: Sequence[PatchOperation | Mapping[str, Any]]
    ) -> None:
        await self._http.patch(self._path(order_id), to_payload_list(operations))

    async def authorize(self, order_id: str, params: OrderBody | None = None) -> Order:
        data = await self._http.post(self._path(order_id, "authorize"), to_payload(params))
        return Order.model_validate(data)

    async def capture(
        self,
        order_id: str,
        params: OrderBody | None = None,
        *,
        request_id: str | None = None,
    ) -> Order:
        data = await self._http.post(
            self._path(order_id, "capture"),
            to_payload(params),
            headers=request_id_headers(request_id),
        )
        return Order.model_validate(data)

    async def confirm(self, order_id: str, params: OrderBody) -> Order:
        """Confirm the payment source the payer chose for an order."""
        data = await self._http.post(
            self._path(order_id, "confirm-payment-source"), to_payload(params)
        )
        return Order.model_validate(data)

    def _path(self, order_id: str, action: str | None = None) -> str:
        path = f"{ORDERS_PATH}/{require_identifier(order_id, param='order_id')}"
        return f"{path}/{action}" if action else path
