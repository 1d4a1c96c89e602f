"""Dashboard snapshot tools."""

import logging

from throwtracker_mcp_server.config import get_config
from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.tools.streak import refresh_streak_cache
from throwtracker_mcp_server.utils.dates import resolve_as_of, resolve_today
from throwtracker_mcp_server.utils.snapshot_builder import (
    build_dashboard,
    format_snapshot_as_json,
)
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_dashboard(weeks: int | None = None, as_of: str | None = None) -> str:
    """Get every derived training metric in one JSON snapshot.

    Returns:
    - This week / last week load, percent change and risk level
    - Graduated alerts (alarm when load rose more than 20%)
    - Logging streak
    - Overall, indoor and outdoor statistics
    - Sessions per event
    - Weekly load series

    Args:
        weeks: Length of the weekly load series (default: CHART_WEEKS, 8)
        as_of: Date to evaluate on (YYYY-MM-DD, default: today)

    Returns:
        JSON string with the dashboard
    """
    today, error_msg = resolve_as_of(as_of)
    if error_msg:
        return error_msg
    today = resolve_today(today)

    week_count = weeks if weeks is not None else get_config().chart_weeks
    if week_count < 1:
        return f"Invalid number of weeks: {week_count}. Must be at least 1."

    store = get_store()
    try:
        sessions = store.get_sessions()
        settings = store.get_settings()
        refresh_streak_cache(store, today)
    except StorageError as e:
        logger.error("Error building dashboard: %s", e)
        return f"Error building dashboard: {e}"

    snapshot = build_dashboard(
        sessions,
        now=today,
        week_count=week_count,
        settings=settings,
    )

    return format_snapshot_as_json(snapshot)
