"""
ThrowTracker MCP Server

This module implements a Model Context Protocol (MCP) server for logging
throwing-sport training sessions and analysing the accumulated history.

Main Features:
    - Session logging for shot put, discus, hammer and javelin
    - Training load (throws × RPE) per session and per calendar week
    - Week-over-week injury risk classification (safe / warning / danger)
    - Consecutive-day logging streaks
    - Overall, season and per-event statistics
    - Weekly load series for charting
    - CSV and JSON export

Usage:
    The server loads configuration from environment variables (optionally via
    a .env file) and stores data in a single JSON file.

    To run the server:
        $ python -m throwtracker_mcp_server.server

    MCP tools provided:
        Sessions:
            - log_session
            - delete_session
            - list_sessions
            - get_session_details
            - get_weight_presets

        Load Management:
            - get_load_status
            - get_weekly_loads

        Statistics:
            - get_training_stats
            - get_streak
            - get_dashboard

        Settings & Data:
            - get_settings
            - update_settings
            - clear_all_data
            - export_sessions_csv
            - export_backup_json
"""

import logging

from throwtracker_mcp_server.config import get_config
from throwtracker_mcp_server.mcp_instance import mcp
from throwtracker_mcp_server.server_setup import setup_transport, start_server

# Get configuration instance
config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("throwtracker_mcp_server")

# Import tool modules to register them (tools register themselves via @mcp.tool() decorators)
from throwtracker_mcp_server.tools import (  # pylint: disable=wrong-import-position  # noqa: E402
    register_tools,
    log_session,
    delete_session,
    list_sessions,
    get_session_details,
    get_weight_presets,
    get_load_status,
    get_weekly_loads,
    get_training_stats,
    get_streak,
    get_dashboard,
    get_settings,
    update_settings,
    clear_all_data,
    export_sessions_csv,
    export_backup_json,
)

# pylint: disable=duplicate-code  # This __all__ list is intentionally similar to tools/__init__.py
__all__ = [
    "mcp",
    "log_session",
    "delete_session",
    "list_sessions",
    "get_session_details",
    "get_weight_presets",
    "get_load_status",
    "get_weekly_loads",
    "get_training_stats",
    "get_streak",
    "get_dashboard",
    "get_settings",
    "update_settings",
    "clear_all_data",
    "export_sessions_csv",
    "export_backup_json",
]


def main() -> None:
    """Entry point for the throwtracker-mcp-server command."""
    logger.info("Registered tools: %s", ", ".join(register_tools(mcp)))
    logger.info("Data file: %s", config.data_file)

    # Setup transport and start server
    selected_transport = setup_transport()
    start_server(mcp, selected_transport)


# Run the server
if __name__ == "__main__":
    main()
