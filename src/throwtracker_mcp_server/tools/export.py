"""Data export tools."""

import logging

from throwtracker_mcp_server.analytics.stats import filter_sessions
from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.utils.export import (
    build_backup,
    format_backup_as_json,
    sessions_to_csv,
)
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def export_sessions_csv(
    event: str = "all",
    season: str = "all",
    session_type: str = "all",
    pr_only: bool = False,
) -> str:
    """Export sessions as CSV, including the load column.

    Args:
        event: Filter by event, or "all" (default)
        season: Filter by season, or "all" (default)
        session_type: Filter by session type, or "all" (default)
        pr_only: Only export PR days
    """
    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    try:
        filtered = filter_sessions(sessions, event, season, session_type, pr_only)
    except ValueError as e:
        return f"Invalid filter: {e}"

    csv_text = sessions_to_csv(filtered)
    if not csv_text:
        return "No sessions to export"
    return csv_text


@mcp.tool()
async def export_backup_json() -> str:
    """Export all data (sessions, settings, streak) as a JSON backup."""
    store = get_store()
    try:
        backup = build_backup(store.get_sessions(), store.get_settings(), store.get_streak())
    except StorageError as e:
        logger.error("Error exporting backup: %s", e)
        return f"Error exporting backup: {e}"
    return format_backup_as_json(backup)
