"""
Unit tests for the MCP tools.

The store is pointed at a temporary file and every date-dependent call
passes as_of, so results do not depend on the day the tests run.
"""

import asyncio
import json
import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from throwtracker_mcp_server.server import (  # pylint: disable=wrong-import-position
    clear_all_data,
    delete_session,
    export_backup_json,
    export_sessions_csv,
    get_dashboard,
    get_load_status,
    get_session_details,
    get_settings,
    get_streak,
    get_training_stats,
    get_weekly_loads,
    get_weight_presets,
    list_sessions,
    log_session,
    update_settings,
)
from throwtracker_mcp_server.analytics.alerts import LOAD_DANGER_MESSAGE  # pylint: disable=wrong-import-position
from throwtracker_mcp_server.storage import SessionStore  # pylint: disable=wrong-import-position

TOOL_MODULES = ("sessions", "load", "stats", "streak", "snapshot", "settings", "export")


@pytest.fixture
def store(tmp_path, monkeypatch):
    """Session store on a temporary file, used by every tool module."""
    session_store = SessionStore(tmp_path / "data.json")
    for module in TOOL_MODULES:
        monkeypatch.setattr(
            f"throwtracker_mcp_server.tools.{module}.get_store",
            lambda: session_store,
        )
    return session_store


def _log(date, throws, rpe, event="shot-put", **kwargs):
    return asyncio.run(log_session(
        event=event,
        session_type=kwargs.pop("session_type", "technique"),
        throw_count=throws,
        rpe=rpe,
        date=date,
        **kwargs,
    ))


def test_log_session_and_list(store):
    """Test logging stores a session and listing shows it."""
    result = _log("2026-10-20", 30, 6, pr_day=True, pr_distance=17.2)

    assert result.startswith("Session saved!")
    assert "Load: 180" in result
    assert len(store.get_sessions()) == 1

    listing = asyncio.run(list_sessions())
    assert "Sessions (1 of 1)" in listing
    assert "PR" in listing


def test_log_session_rejects_invalid_rpe(store):
    """Test invalid input is reported and nothing is stored."""
    result = _log("2026-10-20", 30, 11)

    assert "Invalid RPE" in result
    assert store.get_sessions() == []


def test_log_session_rejects_compact_date(store):
    """Test a compact date is rejected instead of stored as given."""
    result = _log("20261020", 20, 5)

    assert "Invalid date format" in result
    assert store.get_sessions() == []


def test_log_session_uses_settings_units(store):
    """Test the default weight unit comes from settings."""
    asyncio.run(update_settings(weight_unit="g"))
    _log("2026-10-20", 20, 5, event="javelin", implement_weight=800)

    assert store.get_sessions()[0].weight_unit.value == "g"


def test_list_sessions_filters(store):
    """Test list filters and invalid filter values."""
    _log("2026-10-19", 20, 5, event="discus")
    _log("2026-10-20", 20, 5, event="hammer", season="outdoor")

    assert "Sessions (1 of 2)" in asyncio.run(list_sessions(event="hammer"))
    assert "No sessions found" in asyncio.run(list_sessions(pr_only=True))
    assert "Invalid event filter" in asyncio.run(list_sessions(event="pole-vault"))


def test_list_sessions_rejects_bad_limit(store):
    """Test a limit below 1 is rejected."""
    _log("2026-10-19", 20, 5)
    _log("2026-10-20", 20, 5)

    assert asyncio.run(list_sessions(limit=-1)).startswith("Invalid limit")
    assert asyncio.run(list_sessions(limit=0)).startswith("Invalid limit")
    assert "... 1 more" in asyncio.run(list_sessions(limit=1))


def test_session_details_and_delete(store):
    """Test details lookup and deletion by id."""
    _log("2026-10-20", 12, 9, notes="Opener felt great")
    session_id = store.get_sessions()[0].id

    details = asyncio.run(get_session_details(session_id))
    assert "9 (Very Hard)" in details
    assert "Opener felt great" in details

    assert asyncio.run(delete_session(session_id)) == f"Deleted session {session_id}"
    assert "No session found" in asyncio.run(delete_session(session_id))


def test_load_status_flags_risky_increase(store):
    """Test a >20% week-over-week increase is flagged."""
    _log("2026-10-13", 100, 1)
    _log("2026-10-20", 121, 1)

    result = asyncio.run(get_load_status(as_of="2026-10-21"))

    assert "This week: 121" in result
    assert "Last week: 100" in result
    assert "+21%" in result
    assert LOAD_DANGER_MESSAGE in result


def test_load_status_without_baseline_is_safe(store):
    """Test no load last week reports a safe 0% change."""
    _log("2026-10-20", 50, 8)

    result = asyncio.run(get_load_status(as_of="2026-10-21"))

    assert "+0%" in result
    assert "safe range" in result


def test_load_status_invalid_date(store):  # pylint: disable=unused-argument
    """Test an invalid as_of date is reported."""
    assert "Invalid date format" in asyncio.run(get_load_status(as_of="yesterday"))


def test_weekly_loads(store):
    """Test the weekly series lists every week."""
    _log("2026-10-20", 10, 5)

    result = asyncio.run(get_weekly_loads(weeks=3, as_of="2026-10-21"))

    assert "Weekly Load (3 weeks)" in result
    assert "2 weeks ago" in result
    assert "this week" in result
    assert asyncio.run(get_weekly_loads(weeks=0)).startswith("Invalid number of weeks")


def test_training_stats(store):
    """Test stats include seasons and every event."""
    _log("2026-10-20", 20, 6, season="outdoor")

    result = asyncio.run(get_training_stats())

    assert "Overall:" in result
    assert "Indoor:" in result
    assert "Outdoor:" in result
    assert "Hammer: 0" in result
    assert "Shot Put: 1" in result


def test_streak_updates_cache(store):
    """Test get_streak recomputes and caches the streak."""
    _log("2026-10-19", 10, 5)
    _log("2026-10-20", 10, 5)
    _log("2026-10-20", 10, 5)

    result = asyncio.run(get_streak(as_of="2026-10-21"))

    assert "Current streak: 2 days" in result
    assert store.get_streak() == {"current": 2, "lastLogDate": "2026-10-20"}


def test_dashboard_structure(store):
    """Test the dashboard JSON has every derived value."""
    _log("2026-10-13", 100, 1)
    _log("2026-10-20", 150, 1)

    data = json.loads(asyncio.run(get_dashboard(as_of="2026-10-21")))

    assert data["metadata"]["snapshot_date"] == "2026-10-21"
    assert data["derived_metrics"]["this_week_load"] == 150
    assert data["derived_metrics"]["load_risk"] == {"risky": True, "percentage": 50, "level": "danger"}
    assert data["alert_counts"] == {"alarm": 1, "warning": 0}
    assert len(data["weekly_loads"]) == 8
    assert set(data["seasons"]) == {"indoor", "outdoor"}
    assert data["event_breakdown"]["shot-put"] == 2


def test_dashboard_rejects_bad_weeks(store):  # pylint: disable=unused-argument
    """Test the dashboard rejects the same week counts as get_weekly_loads."""
    for weeks in (0, -3):
        result = asyncio.run(get_dashboard(weeks=weeks, as_of="2026-10-21"))
        assert result.startswith("Invalid number of weeks")


def test_dashboard_flags_lapsed_streak(store):
    """Test a broken streak with logged history raises a warning."""
    _log("2026-10-10", 20, 5)

    data = json.loads(asyncio.run(get_dashboard(as_of="2026-10-21")))

    assert [a["metric"] for a in data["alerts"]] == ["streak"]
    assert data["alert_counts"] == {"alarm": 0, "warning": 1}


def test_dashboard_empty_store(store):  # pylint: disable=unused-argument
    """Test an empty store gives zero values and no alerts."""
    data = json.loads(asyncio.run(get_dashboard(as_of="2026-10-21")))

    assert data["alerts"] == []
    assert data["derived_metrics"]["streak"] == 0
    assert data["stats"]["avg_rpe"] == 0
    assert [w["load"] for w in data["weekly_loads"]] == [0] * 8


def test_settings_tools(store):  # pylint: disable=unused-argument
    """Test settings display and validation."""
    assert "Default weight unit: kg" in asyncio.run(get_settings())
    assert "Invalid weight unit" in asyncio.run(update_settings(weight_unit="lb"))
    assert "Athlete name: Sam" in asyncio.run(update_settings(athlete_name="Sam"))
    assert asyncio.run(update_settings()) == "No settings to update"


def test_clear_all_requires_confirm(store):
    """Test clearing needs confirm=True."""
    _log("2026-10-20", 10, 5)

    assert "Refusing" in asyncio.run(clear_all_data())
    assert len(store.get_sessions()) == 1
    assert asyncio.run(clear_all_data(confirm=True)) == "All data cleared"
    assert store.get_sessions() == []


def test_exports(store):
    """Test CSV and JSON exports."""
    assert asyncio.run(export_sessions_csv()) == "No sessions to export"

    _log("2026-10-20", 10, 5, event="discus")

    csv_text = asyncio.run(export_sessions_csv())
    assert csv_text.splitlines()[0].startswith("Date,Event,Session Type")
    assert "Discus" in csv_text

    backup = json.loads(asyncio.run(export_backup_json()))
    assert len(backup["sessions"]) == 1


def test_corrupt_store_reports_error(store):
    """Test storage errors become error messages."""
    store.path.write_text("{not json", encoding="utf-8")

    assert asyncio.run(get_training_stats()).startswith("Error loading sessions")
    assert asyncio.run(get_dashboard(as_of="2026-10-21")).startswith("Error building dashboard")


def test_weight_presets():
    """Test presets per event."""
    assert "800g (M)" in asyncio.run(get_weight_presets("javelin"))
    assert "Invalid event" in asyncio.run(get_weight_presets("pole-vault"))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
