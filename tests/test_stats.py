"""
Unit tests for summary statistics, season stats and event breakdown.
"""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from throwtracker_mcp_server.analytics.stats import (  # pylint: disable=wrong-import-position
    event_breakdown,
    filter_sessions,
    round_half_up,
    season_stats,
    summary_stats,
)
from throwtracker_mcp_server.utils.types import (  # pylint: disable=wrong-import-position
    Event,
    Season,
    Session,
    SessionType,
)


def _session(session_id, event=Event.SHOT_PUT, season=Season.INDOOR, throws=20, rpe=5,
             pr_day=False, session_type=SessionType.TECHNIQUE):
    return Session(
        id=session_id,
        date="2026-10-20",
        event=event,
        session_type=session_type,
        season=season,
        throw_count=throws,
        rpe=rpe,
        pr_day=pr_day,
    )


SESSIONS = [
    _session("1", Event.SHOT_PUT, Season.INDOOR, throws=30, rpe=6, pr_day=True),
    _session("2", Event.DISCUS, Season.OUTDOOR, throws=25, rpe=7),
    _session("3", Event.JAVELIN, Season.OUTDOOR, throws=15, rpe=8, pr_day=True,
             session_type=SessionType.COMPETITION),
    _session("4", Event.SHOT_PUT, Season.OUTDOOR, throws=40, rpe=4, session_type=SessionType.POWER),
]


def test_summary_stats_empty():
    """Test empty input gives all zeros without dividing by zero."""
    assert summary_stats([]) == {
        "total_sessions": 0,
        "total_throws": 0,
        "avg_rpe": 0,
        "pr_count": 0,
    }


def test_summary_stats():
    """Test totals, average RPE and PR count."""
    stats = summary_stats(SESSIONS)

    assert stats["total_sessions"] == 4
    assert stats["total_throws"] == 110
    assert stats["avg_rpe"] == 6.3  # 25 / 4 = 6.25, rounded half up
    assert stats["pr_count"] == 2


def test_round_half_up():
    """Test halves round away from zero."""
    assert round_half_up(6.25, 1) == 6.3
    assert round_half_up(6.24, 1) == 6.2
    assert round_half_up(2.5) == 3.0


def test_season_stats():
    """Test season stats only include that season."""
    indoor = season_stats(SESSIONS, Season.INDOOR)
    outdoor = season_stats(SESSIONS, "outdoor")

    assert indoor["total_sessions"] == 1
    assert indoor["total_throws"] == 30
    assert outdoor["total_sessions"] == 3
    assert outdoor["avg_rpe"] == 6.3  # 19 / 3 = 6.33
    assert outdoor["pr_count"] == 1


def test_event_breakdown_all_keys_in_order():
    """Test all four events are present, zero-filled, in fixed order."""
    breakdown = event_breakdown(SESSIONS)

    assert list(breakdown) == ["shot-put", "discus", "hammer", "javelin"]
    assert breakdown == {"shot-put": 2, "discus": 1, "hammer": 0, "javelin": 1}
    assert sum(breakdown.values()) == len(SESSIONS)


def test_event_breakdown_empty():
    """Test an empty collection still lists every event."""
    assert event_breakdown([]) == {"shot-put": 0, "discus": 0, "hammer": 0, "javelin": 0}


def test_filter_sessions():
    """Test filtering by event, season, type and PR flag."""
    assert [s.id for s in filter_sessions(SESSIONS, event="shot-put")] == ["1", "4"]
    assert [s.id for s in filter_sessions(SESSIONS, season=Season.OUTDOOR, pr_only=True)] == ["3"]
    assert [s.id for s in filter_sessions(SESSIONS, session_type="power")] == ["4"]
    assert len(filter_sessions(SESSIONS, "all", "all", "all")) == 4


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
