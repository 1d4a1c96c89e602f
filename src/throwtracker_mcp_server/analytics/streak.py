"""Consecutive-day logging streaks."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from throwtracker_mcp_server.utils.dates import parse_session_date, resolve_today
from throwtracker_mcp_server.utils.types import Session


def calculate_streak(
    sessions: Iterable[Session],
    now: date | datetime | None = None,
) -> int:
    """Count consecutive days with at least one session.

    Days are counted by distinct date, so several sessions on the same day
    count once. The streak must end today or yesterday; if the latest session
    is older than yesterday the chain is broken and the streak is 0.

    Args:
        sessions: Session records, in any order
        now: Evaluation instant (default: system clock)

    Returns:
        Streak length in days
    """
    today = resolve_today(now)
    yesterday = today - timedelta(days=1)

    # Future-dated sessions cannot extend a streak ending today
    session_dates = {
        d for d in (parse_session_date(s.date) for s in sessions) if d <= today
    }
    if not session_dates:
        return 0

    if max(session_dates) < yesterday:
        return 0

    check_date = today if today in session_dates else yesterday
    streak = 0
    while check_date in session_dates:
        streak += 1
        check_date -= timedelta(days=1)

    return streak


def last_log_date(sessions: Iterable[Session]) -> str | None:
    """Get the most recent session date, or None when there are no sessions."""
    dates = [s.date for s in sessions]
    return max(dates, key=parse_session_date) if dates else None
