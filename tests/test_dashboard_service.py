# /tests/test_dashboard_service.py

from unittest.mock import MagicMock
from types import SimpleNamespace

from qa_suite.services import dashboard_service


def _row(feature_type, input_length, output_length, ms):
    return SimpleNamespace(
        feature_type=feature_type,
        input_length=input_length,
        output_length=output_length,
        generation_time_ms=ms,
    )


def test_empty_history_yields_zeroes():
    db = MagicMock()
    db.get_generations.return_value = []

    stats = dashboard_service.get_generation_stats(db, "sess_a")

    assert stats.total == 0
    assert stats.by_type == {}
    assert stats.avg_generation_time == 0
    assert stats.unlocked_count == 0
    assert stats.next_achievement.name == "First Steps"
    db.get_generations.assert_called_once_with("sess_a")


def test_aggregates_counts_lengths_and_durations():
    db = MagicMock()
    db.get_generations.return_value = [
        _row("test-generator", 100, 800, 1000),
        _row("test-generator", 50, 400, 2000),
        _row("error-explainer", 30, 200, 1500),
    ]

    stats = dashboard_service.get_generation_stats(db, "sess_a")

    assert stats.total == 3
    assert stats.by_type == {"test-generator": 2, "error-explainer": 1}
    assert stats.total_input_length == 180
    assert stats.total_output_length == 1400
    assert stats.avg_generation_time == 1500
    # 3 generations * 15 minutes = 0.75h, rounded half up to one decimal.
    assert stats.time_saved_hours == 0.8
    assert stats.lines_generated == 18


def test_achievements_unlock_by_threshold():
    db = MagicMock()
    db.get_generations.return_value = (
        [_row("test-generator", 1, 1, 1)] * 5 + [_row("error-explainer", 1, 1, 1)] * 3
    )

    stats = dashboard_service.get_generation_stats(db, "sess_a")
    unlocked = {a.name for a in stats.achievements if a.unlocked}

    assert unlocked == {"First Steps", "Getting Started", "Test Master", "Bug Hunter"}
    assert stats.unlocked_count == 4
    assert stats.next_achievement.name == "Power User"


def test_stats_endpoint_uses_only_the_callers_rows(client):
    payload = {"feature_type": "bug-formatter", "input_code": "abc", "output_result": "formatted", "generation_time_ms": 40}
    client.post("/api/history", json=payload, headers={"X-Session-Id": "browser-a"})
    client.post("/api/history", json=payload, headers={"X-Session-Id": "browser-b"})
    client.post("/api/history", json=payload, headers={"X-Session-Id": "browser-b"})

    response = client.get("/api/stats", headers={"X-Session-Id": "browser-a"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["by_type"] == {"bug-formatter": 1}
    assert body["avg_generation_time"] == 40
