from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from paypal_client.constants import PLANS_PATH
from paypal_client.contracts import (
    CreatePlanRequest,
    PatchOperation,
    Plan,
    PlanList,
    PricingSchemeUpdate,
)
from paypal_client.resources.base import Resource
from paypal_client.utils import build_query, require_identifier, to_payload, to_payload_list


class PlansResource(Resource):
    async def create(self, params: CreatePlanRequest | Mapping[str, Any]) -> Plan:
        data = await self._http.post(PLANS_PATH, to_payload(params))
        return Plan.model_validate(data)

    async def retrieve(self, plan_id: str) -> Plan:
        data = await self._http.get(self._path(plan_id))
        return Plan.model_validate(data)

    async def list(
        self,
        *,
        page_size: int | None = None,
        page: int | None = None,
        total_required: bool | None = None,
    ) -> PlanList:
        query = build_query(page_size=page_size, page=page, total_required=total_required)
        data = await self._http.get(PLANS_PATH, params=query)
        return PlanList.model_validate(data or {})

    async def update(
        self, plan_id: str, operations: Sequence[PatchOperation | Mapping[str, Any]]
    ) -> None:
        await self._http.patch(self._path(plan_id), to_payload_list(operations))

    async def activate(self, plan_id: str) -> None:
        await self._http.post(self._path(plan_id, "activate"))

    async def deactivate(self, plan_id: str) -> None:
        await self._http.post(self._path(plan_id, "deactivate"))

    async def update_pricing(
        self,
        plan_id: str,
        pricing_schemes: Sequence[PricingSchemeUpdate | Mapping[str, Any]],
    ) -> None:
        await self._http.post(
            self._path(plan_id, "update-pricing-schemes"),
            {"pricing_schemes": to_payload_list(pricing_schemes)},
        )

    def _path(self, plan_id: str, action: str | None = None) -> str:
        path = f"{PLANS_PATH}/{require_identifier(plan_id, param='plan_id')}"
        return f"{path}/{action}" if action else path
