"""Shared fixtures: a pinned clock so weekday and year rollover are stable."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from quickadd.deps import get_clock
from quickadd.main import app
from quickadd.utils.clock import fixed_clock

# A Wednesday.
NOW = datetime(2025, 1, 15, 9, 30)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def client():
    app.dependency_overrides[get_clock] = lambda: fixed_clock(NOW)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
