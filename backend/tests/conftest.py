"""
Pytest configuration and shared fixtures for motivator backend tests.
Pins the calendar date so progress lines are predictable.
"""

from datetime import date
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Monday; "Mon Oct 19 2026" has a day seed of 996, so index 996 % 5 == 1.
FIXED_DAY = date(2026, 10, 19)
FIXED_INDEX = 1


@pytest.fixture(autouse=True)
def fixed_today():
    """Patch today() in main so endpoint code does not depend on the wall clock."""
    with patch("motivator.main.today", return_value=FIXED_DAY):
        yield FIXED_DAY


@pytest.fixture
def clean_settings(monkeypatch):
    """Drop cached settings and motivator env vars before and after the test."""
    from motivator.core.config import get_settings

    monkeypatch.delenv("MOTIVATOR_TZ", raising=False)
    monkeypatch.delenv("MOTIVATOR_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def client():
    """FastAPI test client with the date pinned."""
    from motivator.main import app
    return TestClient(app)


@pytest.fixture
def fixed_index():
    """Catalog index every five-line progress bucket resolves to on FIXED_DAY."""
    return FIXED_INDEX
