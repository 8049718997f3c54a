from __future__ import annotations

import pytest

from paypal_client.resilience import exponential_backoff


@pytest.mark.parametrize(
    ("attempt", "expected"),
    [(0, 1.0), (1, 2.0), (2, 4.0), (3, 8.0), (4, 10.0), (10, 10.0)],
)
def test_exponential_backoff_doubles_until_cap(attempt: int, expected: float) -> None:
    assert exponential_backoff(attempt) == expected


def test_exponential_backoff_treats_negative_attempt_as_first() -> None:
    assert exponential_backoff(-1, base_seconds=0.5) == 0.5


def test_exponential_backoff_without_jitter_when_random_is_zero(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("random.uniform", lambda _a, _b: 0.0)

    first = exponential_backoff(1, base_seconds=0.1, cap_seconds=1.0, jitter=0.5)
    second = exponential_backoff(2, base_seconds=0.1, cap_seconds=1.0, jitter=0.5)

    assert first == 0.2
    assert second == 0.4


def test_exponential_backoff_jitter_stays_within_spread(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("random.uniform", lambda _a, b: b)

    assert exponential_backoff(0, base_seconds=1.0, jitter=0.25) == 1.25
