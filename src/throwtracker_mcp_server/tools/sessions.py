"""Session logging and browsing tools."""

import logging

from throwtracker_mcp_server.analytics.stats import filter_sessions
from throwtracker_mcp_server.config import get_config
from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.tools.streak import refresh_streak_cache
from throwtracker_mcp_server.utils.dates import resolve_today
from throwtracker_mcp_server.utils.formatting import (
    WEIGHT_PRESETS,
    event_name,
    format_session_details,
    format_session_summary,
)
from throwtracker_mcp_server.utils.types import Event, Season, SessionType
from throwtracker_mcp_server.utils.validation import resolve_session_payload
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def log_session(
    event: str,
    session_type: str,
    throw_count: int,
    rpe: int,
    date: str | None = None,
    season: str = "indoor",
    implement_weight: float | None = None,
    weight_unit: str | None = None,
    pr_day: bool = False,
    pr_distance: float | None = None,
    distance_unit: str | None = None,
    notes: str = "",
    coach_notes: str = "",
) -> str:
    """Log a throwing session.

    Session load is throws × RPE. Sessions cannot be edited once logged,
    only deleted.

    Args:
        event: One of shot-put, discus, hammer, javelin
        session_type: One of technique, power, competition, recovery
        throw_count: Number of throws performed (positive integer)
        rpe: Rate of Perceived Exertion, 1-10
        date: Session date (YYYY-MM-DD, default: today)
        season: indoor or outdoor (default: indoor)
        implement_weight: Implement weight (optional)
        weight_unit: kg or g (default: from settings)
        pr_day: Whether a personal record was set
        pr_distance: PR distance, only kept when pr_day is true
        distance_unit: m or ft (default: from settings)
        notes: Athlete notes
        coach_notes: Coach notes
    """
    store = get_store()
    config = get_config()
    try:
        settings = store.get_settings()
    except StorageError as e:
        logger.error("Error reading settings: %s", e)
        return f"Error reading settings: {e}"

    session, error_msg = resolve_session_payload({
        "date": date or resolve_today().isoformat(),
        "event": event,
        "sessionType": session_type,
        "season": season,
        "throwCount": throw_count,
        "implementWeight": implement_weight,
        "weightUnit": weight_unit or settings.get("weightUnit") or config.weight_unit,
        "rpe": rpe,
        "prDay": pr_day,
        "prDistance": pr_distance,
        "distanceUnit": distance_unit or settings.get("distanceUnit") or config.distance_unit,
        "notes": notes,
        "coachNotes": coach_notes,
    })
    if error_msg:
        return error_msg

    try:
        stored = store.add_session(session)
        streak = refresh_streak_cache(store)
    except StorageError as e:
        logger.error("Error saving session: %s", e)
        return f"Error saving session: {e}"

    return f"Session saved!\n\n{format_session_details(stored)}\n\nCurrent streak: {streak}"


@mcp.tool()
async def delete_session(session_id: str) -> str:
    """Delete a logged session.

    Args:
        session_id: ID of the session to delete
    """
    store = get_store()
    try:
        deleted = store.delete_session(session_id)
        if deleted:
            refresh_streak_cache(store)
    except StorageError as e:
        logger.error("Error deleting session %s: %s", session_id, e)
        return f"Error deleting session: {e}"

    if not deleted:
        return f"No session found with ID {session_id}"
    return f"Deleted session {session_id}"


@mcp.tool()
async def list_sessions(
    event: str = "all",
    season: str = "all",
    session_type: str = "all",
    pr_only: bool = False,
    limit: int = 50,
) -> str:
    """List logged sessions, newest first.

    Args:
        event: Filter by event, or "all" (default)
        season: Filter by season, or "all" (default)
        session_type: Filter by session type, or "all" (default)
        pr_only: Only show PR days
        limit: Maximum number of sessions to show (default: 50)
    """
    if limit < 1:
        return f"Invalid limit: {limit}. Must be at least 1."

    for value, enum_cls, label in (
        (event, Event, "event"),
        (season, Season, "season"),
        (session_type, SessionType, "session type"),
    ):
        if value != "all" and value not in {member.value for member in enum_cls}:
            return f"Invalid {label} filter: {value}"

    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    filtered = filter_sessions(sessions, event, season, session_type, pr_only)
    if not filtered:
        return "No sessions found. Try adjusting your filters or log a new session."

    output = [f"Sessions ({len(filtered)} of {len(sessions)}):\n"]
    output.extend(format_session_summary(s) for s in filtered[:limit])
    if len(filtered) > limit:
        output.append(f"... {len(filtered) - limit} more")

    return "\n".join(output)


@mcp.tool()
async def get_session_details(session_id: str) -> str:
    """Get full details of one session.

    Args:
        session_id: ID of the session
    """
    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    session = next((s for s in sessions if s.id == session_id), None)
    if session is None:
        return f"No session found with ID {session_id}"
    return format_session_details(session)


@mcp.tool()
async def get_weight_presets(event: str) -> str:
    """Get standard implement weights for an event.

    Args:
        event: One of shot-put, discus, hammer, javelin
    """
    try:
        event_enum = Event(event)
    except ValueError:
        return f"Invalid event: {event}"

    output = [f"{event_name(event_enum)} implements:"]
    output.extend(f"  {preset['label']}" for preset in WEIGHT_PRESETS[event_enum])
    return "\n".join(output)
