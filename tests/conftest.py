from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from paypal_client.core.config import ConfigRegistry  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_default_registry(monkeypatch: pytest.MonkeyPatch) -> ConfigRegistry:
    registry = ConfigRegistry()
    monkeypatch.setattr("paypal_client.client.default_registry", registry)
    return registry
