"""Week-over-week injury risk classification."""

import math
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from throwtracker_mcp_server.analytics.load import sessions_in_week, weekly_load
from throwtracker_mcp_server.utils.dates import resolve_today
from throwtracker_mcp_server.utils.types import RiskLevel, Session

DANGER_THRESHOLD = 20
WARNING_THRESHOLD = 10


class LoadRisk:
    """Result of a single week-over-week load evaluation."""

    def __init__(self, percentage: int, level: RiskLevel):
        """Initialize load risk.

        Args:
            percentage: Rounded week-over-week change in percent
            level: Risk classification
        """
        self.percentage = percentage
        self.level = level

    @property
    def risky(self) -> bool:
        """True only for the danger band."""
        return self.level is RiskLevel.DANGER

    def to_dict(self) -> dict[str, Any]:
        """Convert load risk to dictionary."""
        return {
            "risky": self.risky,
            "percentage": self.percentage,
            "level": self.level.value,
        }

    def __repr__(self) -> str:
        return f"LoadRisk(percentage={self.percentage}, level={self.level.value})"


def calculate_percent_change(current_week_load: float, previous_week_load: float) -> int:
    """Calculate the rounded week-over-week load change.

    A previous load of 0 gives 0: without a baseline there is no relative
    change, whatever the current load.

    Args:
        current_week_load: Load of the current week
        previous_week_load: Load of the previous week

    Returns:
        Percent change rounded half-up to an integer
    """
    if previous_week_load == 0:
        return 0

    change = 100 * (current_week_load - previous_week_load) / previous_week_load
    return math.floor(change + 0.5)


def classify_load_risk(current_week_load: float, previous_week_load: float) -> LoadRisk:
    """Classify the week-over-week load change.

    Bands:
    - danger: change > 20%
    - warning: 10% < change <= 20%
    - safe: everything else, including decreases and no baseline

    Args:
        current_week_load: Load of the current week
        previous_week_load: Load of the previous week

    Returns:
        LoadRisk with percentage and level
    """
    percentage = calculate_percent_change(current_week_load, previous_week_load)

    if percentage > DANGER_THRESHOLD:
        level = RiskLevel.DANGER
    elif percentage > WARNING_THRESHOLD:
        level = RiskLevel.WARNING
    else:
        level = RiskLevel.SAFE

    return LoadRisk(percentage, level)


def weekly_load_risk(
    sessions: Sequence[Session],
    now: date | datetime | None = None,
) -> tuple[int, int, LoadRisk]:
    """Evaluate this week's load against last week's.

    Both weeks are bucketed from the same snapshot and the same instant, so a
    call straddling a week boundary cannot mix two different "nows".

    Args:
        sessions: Session records
        now: Evaluation instant (default: system clock)

    Returns:
        Tuple of (this_week_load, last_week_load, LoadRisk)
    """
    today = resolve_today(now)
    this_week = weekly_load(sessions_in_week(sessions, 0, today))
    last_week = weekly_load(sessions_in_week(sessions, 1, today))
    return this_week, last_week, classify_load_risk(this_week, last_week)


def interpret_load_risk(risk: LoadRisk) -> str:
    """Interpret a load risk classification.

    Args:
        risk: LoadRisk value

    Returns:
        Interpretation string
    """
    if risk.level is RiskLevel.DANGER:
        return "Load increased >20% - Injury risk elevated!"
    elif risk.level is RiskLevel.WARNING:
        return "Moderate load increase - Monitor closely"
    else:
        return "Load is within safe range"
