"""Training statistics tools."""

import logging

from throwtracker_mcp_server.analytics.stats import event_breakdown, season_stats, summary_stats
from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.utils.formatting import event_icon, event_name, format_stats_block
from throwtracker_mcp_server.utils.types import Season
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def get_training_stats() -> str:
    """Get overall training statistics.

    Includes totals (sessions, throws, average RPE, PRs), an indoor vs
    outdoor season comparison and the session count per event.
    """
    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    output = format_stats_block("Overall", summary_stats(sessions))

    for season in Season:
        output.append("")
        output.extend(format_stats_block(season.value.capitalize(), season_stats(sessions, season)))

    output.append("\nSessions by Event:")
    for event, count in event_breakdown(sessions).items():
        output.append(f"  {event_icon(event)} {event_name(event)}: {count}")

    return "\n".join(output)
