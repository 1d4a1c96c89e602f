"""Logging streak tools."""

import logging
from datetime import date

from throwtracker_mcp_server.analytics.streak import calculate_streak, last_log_date
from throwtracker_mcp_server.storage import SessionStore, StorageError, get_store
from throwtracker_mcp_server.utils.dates import resolve_as_of, resolve_today
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


def refresh_streak_cache(store: SessionStore, today: date | None = None) -> int:
    """Recompute the streak from stored sessions and update the cache.

    Raises:
        StorageError: If the store cannot be read or written
    """
    sessions = store.get_sessions()
    streak = calculate_streak(sessions, resolve_today(today))
    store.save_streak(streak, last_log_date(sessions))
    return streak


@mcp.tool()
async def get_streak(as_of: str | None = None) -> str:
    """Get the current logging streak.

    The streak counts consecutive days with at least one logged session,
    ending today or yesterday. Several sessions on one day count once.

    Args:
        as_of: Date to evaluate the streak on (YYYY-MM-DD, default: today)
    """
    today, error_msg = resolve_as_of(as_of)
    if error_msg:
        return error_msg

    store = get_store()
    try:
        streak = refresh_streak_cache(store, today)
        cached = store.get_streak()
    except StorageError as e:
        logger.error("Error computing streak: %s", e)
        return f"Error computing streak: {e}"

    day_word = "day" if streak == 1 else "days"
    output = [f"Current streak: {streak} {day_word} 🔥"]
    if cached.get("lastLogDate"):
        output.append(f"Last session logged: {cached['lastLogDate']}")
    if streak == 0:
        output.append("Log a session today to start a new streak.")

    return "\n".join(output)
