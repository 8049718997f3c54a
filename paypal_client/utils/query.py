from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel


def build_query(**values: Any) -> dict[str, str]:
    """Query parameters for the values that were actually supplied."""
    query: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


def to_payload(params: BaseModel | Mapping[str, Any] | None) -> Any:
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(params)


def to_payload_list(items: Sequence[BaseModel | Mapping[str, Any]]) -> list[Any]:
    return [to_payload(item) for item in items]
