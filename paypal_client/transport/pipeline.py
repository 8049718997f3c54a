from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from functools import partial
from typing import Any

import httpx


@dataclass
class RequestContext:
    """One logical call; replays reuse the same context."""

    method: str
    path: str
    json: Any = None
    params: dict[str, str] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    auth_replayed: bool = False
    transient_attempts: int = 0


Handler = Callable[[RequestContext], Awaitable[httpx.Response]]
Middleware = Callable[..., Awaitable[httpx.Response]]


def compose(middlewares: Sequence[Middleware], handler: Handler) -> Handler:
    """Wrap ``handler`` so the first middleware runs outermost.

    Each middleware is called as ``middleware(ctx, call_next=...)``.
    """
    for middleware in reversed(middlewares):
        handler = partial(middleware, call_next=handler)
    return handler
