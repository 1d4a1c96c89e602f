"""Date helpers shared by the analytics and the tools."""

from datetime import date, datetime


def resolve_today(now: date | datetime | None = None) -> date:
    """Return the calendar date of the evaluation instant.

    Args:
        now: Evaluation instant (default: the system clock)

    Returns:
        Calendar date of ``now``
    """
    if now is None:
        return datetime.now().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def parse_session_date(date_value: str) -> date:
    """Parse a session date (YYYY-MM-DD, optionally with a time part)."""
    return date.fromisoformat(date_value[:10])


def resolve_as_of(as_of: str | None) -> tuple[date | None, str | None]:
    """Resolve an optional YYYY-MM-DD override for "today".

    Args:
        as_of: Date string supplied by the caller, or None

    Returns:
        Tuple of (date or None, error message or None)
    """
    if not as_of:
        return None, None
    try:
        return datetime.strptime(as_of, "%Y-%m-%d").date(), None
    except ValueError:
        return None, f"Invalid date format: {as_of}. Please use YYYY-MM-DD."
