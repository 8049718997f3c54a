from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from paypal_client.constants import SUBSCRIPTIONS_PATH
from paypal_client.contracts import (
    CreateSubscriptionRequest,
    Money,
    PatchOperation,
    ReviseSubscriptionRequest,
    Subscription,
    SubscriptionList,
    SubscriptionRevision,
    TransactionList,
)
from paypal_client.resources.base import Resource
from paypal_client.utils import build_query, require_identifier, to_payload, to_payload_list

DEFAULT_CANCEL_REASON = "User requested cancellation"


class SubscriptionsResource(Resource):
    async def create(
        self, params: CreateSubscriptionRequest | Mapping[str, Any]
    ) -> Subscription:
        data = await self._http.post(SUBSCRIPTIONS_PATH, to_payload(params))
        return Subscription.model_validate(data)

    async def retrieve(self, subscription_id: str) -> Subscription:
        data = await self._http.get(self._path(subscription_id))
        return Subscription.model_validate(data)

    async def update(
        self,
        subscription_id: str,
        operations: Sequence[PatchOperation | Mapping[str, Any]],
    ) -> None:
        await self._http.patch(self._path(subscription_id), to_payload_list(operations))

    async def revise(
        self,
        subscription_id: str,
        params: ReviseSubscriptionRequest | Mapping[str, Any],
    ) -> SubscriptionRevision:
        """Switch plan or quantity; the payer may have to approve the change."""
        data = await self._http.post(self._path(subscription_id, "revise"), to_payload(params))
        return SubscriptionRevision.model_validate(data)

    async def list(
        self,
        *,
        plan_id: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> SubscriptionList:
        query = build_query(
            plan_id=plan_id,
            start_time=start_time,
            end_time=end_time,
            page_size=page_size,
            page=page,
        )
        data = await self._http.get(SUBSCRIPTIONS_PATH, params=query)
        return SubscriptionList.model_validate(data or {})

    async def cancel(self, subscription_id: str, reason: str | None = None) -> None:
        await self._http.post(
            self._path(subscription_id, "cancel"), {"reason": reason or DEFAULT_CANCEL_REASON}
        )

    async def suspend(self, subscription_id: str, reason: str) -> None:
        await self._http.post(self._path(subscription_id, "suspend"), {"reason": reason})

    async def activate(self, subscription_id: str, reason: str) -> None:
        await self._http.post(self._path(subscription_id, "activate"), {"reason": reason})

    async def capture_payment(
        self,
        subscription_id: str,
        note: str | None = None,
        amount: Money | Mapping[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Charge an outstanding balance after failed payments."""
        body: dict[str, Any] = {}
        if note:
            body["note"] = note
        if amount is not None:
            body["amount"] = to_payload(amount)
        return await self._http.post(self._path(subscription_id, "capture"), body)

    async def list_transactions(
        self, subscription_id: str, start_time: str, end_time: str
    ) -> TransactionList:
        query = build_query(start_time=start_time, end_time=end_time)
        data = await self._http.get(self._path(subscription_id, "transactions"), params=query)
        return TransactionList.model_validate(data or {})

    def _path(self, subscription_id: str, action: str | None = None) -> str:
        segment = require_identifier(subscription_id, param="subscription_id")
        path = f"{SUBSCRIPTIONS_PATH}/{segment}"
        return f"{path}/{action}" if action else path
