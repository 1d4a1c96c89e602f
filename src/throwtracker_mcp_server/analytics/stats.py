"""Aggregate session statistics and breakdowns."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from throwtracker_mcp_server.utils.types import Event, Season, Session, SessionType


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero (6.25 -> 6.3), unlike built-in round()."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def summary_stats(sessions: Sequence[Session]) -> dict[str, Any]:
    """Calculate summary statistics for a set of sessions.

    Args:
        sessions: Session records

    Returns:
        Dictionary with total_sessions, total_throws, avg_rpe (one decimal,
        0.0 when there are no sessions) and pr_count
    """
    total_sessions = len(sessions)
    total_throws = sum(s.throw_count for s in sessions)
    pr_count = sum(1 for s in sessions if s.pr_day)

    if total_sessions == 0:
        avg_rpe = 0.0
    else:
        avg_rpe = round_half_up(sum(s.rpe for s in sessions) / total_sessions, 1)

    return {
        "total_sessions": total_sessions,
        "total_throws": total_throws,
        "avg_rpe": avg_rpe,
        "pr_count": pr_count,
    }


def season_stats(sessions: Sequence[Session], season: Season | str) -> dict[str, Any]:
    """Calculate summary statistics for one season only."""
    season = Season(season)
    return summary_stats([s for s in sessions if s.season == season])


def event_breakdown(sessions: Sequence[Session]) -> dict[str, int]:
    """Count sessions per event.

    All four events are always present (zero-filled), in the fixed order
    shot-put, discus, hammer, javelin.

    Args:
        sessions: Session records

    Returns:
        Mapping of event value to session count
    """
    breakdown = {event.value: 0 for event in Event}

    for session in sessions:
        breakdown[Event(session.event).value] += 1

    return breakdown


def filter_sessions(
    sessions: Sequence[Session],
    event: Event | str | None = None,
    season: Season | str | None = None,
    session_type: SessionType | str | None = None,
    pr_only: bool = False,
) -> list[Session]:
    """Filter sessions by event, season, session type and PR flag.

    None or "all" leaves a criterion unconstrained.

    Args:
        sessions: Session records
        event: Event to keep
        season: Season to keep
        session_type: Session type to keep
        pr_only: Keep only PR days

    Returns:
        Matching sessions, in input order
    """
    event_filter = Event(event) if event and event != "all" else None
    season_filter = Season(season) if season and season != "all" else None
    type_filter = SessionType(session_type) if session_type and session_type != "all" else None

    result = []
    for session in sessions:
        if event_filter and session.event != event_filter:
            continue
        if season_filter and session.season != season_filter:
            continue
        if type_filter and session.session_type != type_filter:
            continue
        if pr_only and not session.pr_day:
            continue
        result.append(session)

    return result
