"""Training load analysis tools."""

import logging

from throwtracker_mcp_server.analytics.alerts import LOAD_DANGER_MESSAGE
from throwtracker_mcp_server.analytics.load import weekly_series
from throwtracker_mcp_server.analytics.risk import interpret_load_risk, weekly_load_risk
from throwtracker_mcp_server.config import get_config
from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.utils.dates import resolve_as_of, resolve_today
from throwtracker_mcp_server.utils.formatting import format_percent_change
from throwtracker_mcp_server.utils.types import RiskLevel
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)

STATUS_ICONS = {
    RiskLevel.SAFE: "✅",
    RiskLevel.WARNING: "⚡",
    RiskLevel.DANGER: "⚠️",
}


@mcp.tool()
async def get_load_status(as_of: str | None = None) -> str:
    """Get this week's training load against last week's.

    Load is throws × RPE summed over a Sunday-to-Saturday week.
    A week-over-week increase above 20% flags elevated injury risk,
    10-20% is a moderate increase to monitor.

    Args:
        as_of: Date to evaluate on (YYYY-MM-DD, default: today)
    """
    today, error_msg = resolve_as_of(as_of)
    if error_msg:
        return error_msg

    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    this_week, last_week, risk = weekly_load_risk(sessions, resolve_today(today))

    output = ["Weekly Load:"]
    output.append(f"  This week: {this_week}")
    output.append(f"  Last week: {last_week}")
    output.append(f"  Change: {format_percent_change(risk.percentage)}")
    output.append(f"\nStatus: {STATUS_ICONS[risk.level]} {interpret_load_risk(risk)}")

    if risk.risky:
        logger.warning("Weekly load up %s%% on last week", risk.percentage)
        output.append(f"\n{LOAD_DANGER_MESSAGE}")

    return "\n".join(output)


@mcp.tool()
async def get_weekly_loads(weeks: int | None = None, as_of: str | None = None) -> str:
    """Get weekly training load for the last few weeks, oldest first.

    Weeks without sessions are included with a load of 0.

    Args:
        weeks: Number of weeks (default: CHART_WEEKS, 8)
        as_of: Date to evaluate on (YYYY-MM-DD, default: today)
    """
    today, error_msg = resolve_as_of(as_of)
    if error_msg:
        return error_msg

    week_count = weeks if weeks is not None else get_config().chart_weeks
    if week_count < 1:
        return f"Invalid number of weeks: {week_count}. Must be at least 1."

    try:
        sessions = get_store().get_sessions()
    except StorageError as e:
        logger.error("Error loading sessions: %s", e)
        return f"Error loading sessions: {e}"

    series = weekly_series(sessions, week_count, resolve_today(today))
    max_load = max((entry["load"] for entry in series), default=0) or 1

    output = [f"Weekly Load ({week_count} weeks):\n"]
    for entry in series:
        bar = "█" * round(20 * entry["load"] / max_load)
        output.append(f"  {entry['label']:>12} ({entry['week_start']}): {entry['load']:>5} {bar}")

    return "\n".join(output)
