"""Training load metrics and calendar-week bucketing."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from typing import Any

from throwtracker_mcp_server.utils.dates import parse_session_date, resolve_today
from throwtracker_mcp_server.utils.types import Session

DEFAULT_SERIES_WEEKS = 8


def compute_load(session: Session) -> int:
    """Calculate session load.

    Load = Throws × RPE

    Args:
        session: Session record

    Returns:
        Unitless training load
    """
    return session.throw_count * session.rpe


def week_bounds(
    weeks_ago: int = 0,
    now: date | datetime | None = None,
) -> tuple[date, date]:
    """Get the calendar week ``weeks_ago`` weeks before the current one.

    Weeks run from Sunday (inclusive) to the following Sunday (exclusive)
    and are anchored on ``now``, never on a session date.

    Args:
        weeks_ago: 0 for the current week, 1 for the previous week, etc.
        now: Evaluation instant (default: system clock)

    Returns:
        Tuple of (week_start, week_end), end exclusive
    """
    today = resolve_today(now)
    # date.weekday() is 0 for Monday; shift so Sunday is day 0
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday + 7 * weeks_ago)
    return start, start + timedelta(days=7)


def sessions_in_week(
    sessions: Iterable[Session],
    weeks_ago: int = 0,
    now: date | datetime | None = None,
) -> list[Session]:
    """Select the sessions whose date falls in the given calendar week.

    Args:
        sessions: Session records, in any order
        weeks_ago: 0 for the current week, 1 for the previous week, etc.
        now: Evaluation instant (default: system clock)

    Returns:
        Matching sessions, in input order
    """
    start, end = week_bounds(weeks_ago, now)
    return [s for s in sessions if start <= parse_session_date(s.date) < end]


def weekly_load(sessions: Iterable[Session]) -> int:
    """Sum session loads. Returns 0 for no sessions."""
    return sum(compute_load(s) for s in sessions)


def weekly_series(
    sessions: Sequence[Session],
    week_count: int = DEFAULT_SERIES_WEEKS,
    now: date | datetime | None = None,
) -> list[dict[str, Any]]:
    """Build a contiguous weekly load series for charting.

    Weeks with no sessions are included with a load of 0, so the series
    always has exactly ``week_count`` entries.

    Args:
        sessions: Session records
        week_count: Number of weeks to include (default: 8)
        now: Evaluation instant (default: system clock)

    Returns:
        List of {"label", "load", "week_start"} dicts, oldest first
    """
    today = resolve_today(now)
    series = []

    for weeks_ago in range(week_count - 1, -1, -1):
        start, _ = week_bounds(weeks_ago, today)
        series.append({
            "label": format_week_label(weeks_ago),
            "load": weekly_load(sessions_in_week(sessions, weeks_ago, today)),
            "week_start": start.isoformat(),
        })

    return series


def format_week_label(weeks_ago: int) -> str:
    """Label a week relative to the current one."""
    if weeks_ago == 0:
        return "this week"
    return f"{weeks_ago} weeks ago"
