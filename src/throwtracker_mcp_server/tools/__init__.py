"""
MCP tools registry for the ThrowTracker MCP Server.

This module registers all available MCP tools with the FastMCP server instance.
"""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

# Import all tools for re-export
# Note: Tools register themselves via @mcp.tool() decorators when imported
from throwtracker_mcp_server.tools.sessions import (  # noqa: F401
    log_session,
    delete_session,
    list_sessions,
    get_session_details,
    get_weight_presets,
)
from throwtracker_mcp_server.tools.load import (  # noqa: F401
    get_load_status,
    get_weekly_loads,
)
from throwtracker_mcp_server.tools.stats import (  # noqa: F401
    get_training_stats,
)
from throwtracker_mcp_server.tools.streak import (  # noqa: F401
    get_streak,
)
from throwtracker_mcp_server.tools.snapshot import (  # noqa: F401
    get_dashboard,
)
from throwtracker_mcp_server.tools.settings import (  # noqa: F401
    get_settings,
    update_settings,
    clear_all_data,
)
from throwtracker_mcp_server.tools.export import (  # noqa: F401
    export_sessions_csv,
    export_backup_json,
)


def register_tools(mcp_instance: FastMCP) -> list[str]:
    """
    Register all MCP tools with the FastMCP server instance.

    Tools register themselves through their @mcp.tool() decorators when the
    modules above are imported; this returns the registered names.

    Args:
        mcp_instance (FastMCP): The FastMCP server instance to register tools with.

    Returns:
        Names of the registered tools
    """
    return [tool.name for tool in mcp_instance._tool_manager.list_tools()]  # pylint: disable=protected-access


__all__ = [
    "register_tools",
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
