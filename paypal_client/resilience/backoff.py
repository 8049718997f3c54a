from __future__ import annotations

import random


def exponential_backoff(
    attempt: int, base_seconds: float = 1.0, cap_seconds: float = 10.0, jitter: float = 0.0
) -> float:
    """Delay before replay number ``attempt + 1``; ``attempt`` starts at 0."""
    raw = min(cap_seconds, base_seconds * (2 ** max(0, attempt)))
    if not jitter:
        return raw
    spread = raw * jitter
    return max(0.0, raw + random.uniform(-spread, spread))
