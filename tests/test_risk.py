"""
Unit tests for week-over-week load risk classification.
"""

import pathlib
import sys
from datetime import date

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from throwtracker_mcp_server.analytics.risk import (  # pylint: disable=wrong-import-position
    calculate_percent_change,
    classify_load_risk,
    interpret_load_risk,
    weekly_load_risk,
)
from throwtracker_mcp_server.utils.types import (  # pylint: disable=wrong-import-position
    Event,
    RiskLevel,
    Season,
    Session,
    SessionType,
)


def _session(session_id, day, throws, rpe):
    return Session(
        id=session_id,
        date=day,
        event=Event.DISCUS,
        session_type=SessionType.POWER,
        season=Season.INDOOR,
        throw_count=throws,
        rpe=rpe,
    )


def test_no_previous_load_is_always_safe():
    """Test a previous load of 0 gives 0% and safe, whatever the current load."""
    for current in (0, 1, 500, 10_000):
        risk = classify_load_risk(current, 0)
        assert risk.percentage == 0
        assert risk.risky is False
        assert risk.level is RiskLevel.SAFE


def test_exactly_twenty_percent_is_not_risky():
    """Test the danger band is strictly above 20%."""
    risk = classify_load_risk(120, 100)

    assert risk.percentage == 20
    assert risk.risky is False
    assert risk.level is RiskLevel.WARNING


def test_twenty_one_percent_is_risky():
    """Test 21% is in the danger band."""
    risk = classify_load_risk(121, 100)

    assert risk.percentage == 21
    assert risk.risky is True
    assert risk.level is RiskLevel.DANGER


def test_warning_band_lower_boundary():
    """Test 10% is safe and 11% is a warning."""
    assert classify_load_risk(110, 100).level is RiskLevel.SAFE
    assert classify_load_risk(111, 100).level is RiskLevel.WARNING


def test_decrease_is_safe():
    """Test a load decrease is safe with a negative percentage."""
    risk = classify_load_risk(50, 100)

    assert risk.percentage == -50
    assert risk.level is RiskLevel.SAFE


def test_percent_change_rounds_half_up():
    """Test rounding matches half-up, including negative halves."""
    assert calculate_percent_change(201, 200) == 1  # 0.5%
    assert calculate_percent_change(199, 200) == 0  # -0.5%
    assert calculate_percent_change(403, 400) == 1  # 0.75%


def test_to_dict():
    """Test the serialized form of a classification."""
    assert classify_load_risk(121, 100).to_dict() == {
        "risky": True,
        "percentage": 21,
        "level": "danger",
    }


def test_interpret_load_risk():
    """Test interpretation strings for each band."""
    assert "Injury risk" in interpret_load_risk(classify_load_risk(200, 100))
    assert "Monitor" in interpret_load_risk(classify_load_risk(115, 100))
    assert "safe" in interpret_load_risk(classify_load_risk(100, 100))


def test_weekly_load_risk_uses_same_now_for_both_weeks():
    """Test this week and last week are bucketed from one instant."""
    sessions = [
        _session("this", "2026-10-20", throws=121, rpe=1),
        _session("last", "2026-10-13", throws=100, rpe=1),
        _session("old", "2026-10-01", throws=999, rpe=10),
    ]

    this_week, last_week, risk = weekly_load_risk(sessions, date(2026, 10, 21))

    assert this_week == 121
    assert last_week == 100
    assert risk.risky is True


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
