"""
API tests for progress, celebration and streak messages.
Date is pinned via conftest.
"""

import pytest

from motivator.core.constants import ONBOARDING_MESSAGE, ProgressCategory
from motivator.services.message_builder import CELEBRATION_MESSAGES, PROGRESS_MESSAGES


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_progress_no_habits_returns_onboarding(client):
    """POST /messages/progress with total 0 returns the onboarding line and no category."""
    r = client.post("/messages/progress", json={"completed": 3, "total": 0})
    assert r.status_code == 200
    data = r.json()
    assert data["text"] == ONBOARDING_MESSAGE
    assert data["category"] is None
    assert data["template_id"] == "punchy:progress:onboarding"


@pytest.mark.parametrize(
    "completed,total,category",
    [
        (0, 10, ProgressCategory.ZERO),
        (4, 10, ProgressCategory.PARTIAL),
        (5, 10, ProgressCategory.ALMOST_DONE),
        (10, 10, ProgressCategory.COMPLETE),
        (15, 10, ProgressCategory.COMPLETE),
    ],
)
def test_progress_buckets(client, fixed_index, completed, total, category):
    """Bucket boundaries; line is the pinned day's index in that bucket."""
    r = client.post("/messages/progress", json={"completed": completed, "total": total})
    assert r.status_code == 200
    data = r.json()
    assert data["category"] == category.value
    assert data["text"] == PROGRESS_MESSAGES[category][fixed_index]
    assert data["template_id"] == f"punchy:progress:{category.value}:{fixed_index}"


def test_progress_same_day_is_stable(client):
    first = client.post("/messages/progress", json={"completed": 1, "total": 3}).json()
    second = client.post("/messages/progress", json={"completed": 2, "total": 6}).json()
    assert first == second


def test_progress_negative_input_422(client):
    r = client.post("/messages/progress", json={"completed": -1, "total": 4})
    assert r.status_code == 422


def test_progress_missing_field_422(client):
    r = client.post("/messages/progress", json={"completed": 1})
    assert r.status_code == 422


def test_celebration_returns_catalog_line(client):
    """GET /messages/celebration returns one of the fixed lines with a matching id."""
    r = client.get("/messages/celebration")
    assert r.status_code == 200
    data = r.json()
    assert data["text"] in CELEBRATION_MESSAGES
    idx = int(data["template_id"].rsplit(":", 1)[1])
    assert CELEBRATION_MESSAGES[idx] == data["text"]


@pytest.mark.parametrize(
    "streak,text,tier",
    [
        (0, "Start your streak today.", "none"),
        (1, "Day 1. The beginning of something great.", "first_day"),
        (5, "5 days. Building momentum.", "building"),
        (45, "45 days. You're unstoppable.", "unstoppable"),
        (150, "150 days. Legendary.", "legendary"),
    ],
)
def test_streak(client, streak, text, tier):
    r = client.post("/messages/streak", json={"streak": streak})
    assert r.status_code == 200
    data = r.json()
    assert data["text"] == text
    assert data["tier"] == tier
    assert data["template_id"] == f"punchy:streak:{tier}"


def test_streak_negative_422(client):
    r = client.post("/messages/streak", json={"streak": -3})
    assert r.status_code == 422
