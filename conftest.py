from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 25, 9, 30, 0)


@pytest.fixture
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
