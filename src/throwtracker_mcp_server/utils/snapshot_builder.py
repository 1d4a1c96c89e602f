"""Dashboard snapshot: every derived metric computed from one session snapshot."""

import json
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from throwtracker_mcp_server.analytics.alerts import count_alerts_by_severity, generate_alerts
from throwtracker_mcp_server.analytics.load import DEFAULT_SERIES_WEEKS, weekly_series
from throwtracker_mcp_server.analytics.risk import interpret_load_risk, weekly_load_risk
from throwtracker_mcp_server.analytics.stats import event_breakdown, season_stats, summary_stats
from throwtracker_mcp_server.analytics.streak import calculate_streak, last_log_date
from throwtracker_mcp_server.utils.dates import resolve_today
from throwtracker_mcp_server.utils.types import Season, Session


def build_dashboard(
    sessions: Sequence[Session],
    now: date | datetime | None = None,
    week_count: int = DEFAULT_SERIES_WEEKS,
    settings: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the dashboard snapshot.

    All values are computed from the same sessions and the same instant, so
    this-week and last-week loads can never straddle a week boundary.

    Args:
        sessions: Session records
        now: Evaluation instant (default: system clock)
        week_count: Length of the weekly load series (default: 8)
        settings: Athlete settings to echo in the metadata

    Returns:
        Dictionary with the complete dashboard
    """
    today = resolve_today(now)

    this_week_load, last_week_load, risk = weekly_load_risk(sessions, today)

    derived_metrics: dict[str, Any] = {
        "this_week_load": this_week_load,
        "last_week_load": last_week_load,
        "load_risk": risk.to_dict(),
        "load_status": interpret_load_risk(risk),
        "streak": calculate_streak(sessions, today),
        "sessions_count": len(sessions),
    }

    alerts = generate_alerts(derived_metrics)

    settings = settings or {}
    return {
        "metadata": {
            "athlete_name": settings.get("athleteName", ""),
            "primary_event": settings.get("primaryEvent", ""),
            "snapshot_date": today.isoformat(),
            "sessions_count": len(sessions),
            "last_log_date": last_log_date(sessions),
        },
        "alerts": alerts,
        "alert_counts": count_alerts_by_severity(alerts),
        "derived_metrics": derived_metrics,
        "stats": summary_stats(sessions),
        "seasons": {season.value: season_stats(sessions, season) for season in Season},
        "event_breakdown": event_breakdown(sessions),
        "weekly_loads": weekly_series(sessions, week_count, today),
    }


def format_snapshot_as_json(snapshot: dict[str, Any]) -> str:
    """Format snapshot as JSON string.

    Args:
        snapshot: Snapshot dictionary

    Returns:
        JSON string
    """
    return json.dumps(snapshot, indent=2, default=str, ensure_ascii=False)
