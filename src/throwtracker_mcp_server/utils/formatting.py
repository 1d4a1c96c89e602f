"""
Formatting utilities for the ThrowTracker MCP Server

This module contains display labels and text formatting for sessions and
derived metrics. Nothing here feeds back into the analytics.
"""

from datetime import datetime
from typing import Any

from throwtracker_mcp_server.analytics.load import compute_load
from throwtracker_mcp_server.utils.types import Event, Session, SessionType

EVENT_NAMES = {
    Event.SHOT_PUT: "Shot Put",
    Event.DISCUS: "Discus",
    Event.HAMMER: "Hammer",
    Event.JAVELIN: "Javelin",
}

EVENT_ICONS = {
    Event.SHOT_PUT: "🔴",
    Event.DISCUS: "🟠",
    Event.HAMMER: "🟡",
    Event.JAVELIN: "🟢",
}

SESSION_TYPE_ICONS = {
    SessionType.TECHNIQUE: "🎯",
    SessionType.POWER: "💪",
    SessionType.COMPETITION: "🏆",
    SessionType.RECOVERY: "🧘",
}

RPE_DESCRIPTORS = {
    1: "Very Light",
    2: "Light",
    3: "Light",
    4: "Moderate",
    5: "Moderate",
    6: "Moderate",
    7: "Hard",
    8: "Hard",
    9: "Very Hard",
    10: "Maximum",
}

# Standard competition and training implements per event
WEIGHT_PRESETS: dict[Event, list[dict[str, Any]]] = {
    Event.SHOT_PUT: [
        {"value": 7.26, "unit": "kg", "label": "7.26kg (M)"},
        {"value": 4, "unit": "kg", "label": "4kg (W)"},
        {"value": 6, "unit": "kg", "label": "6kg (HS)"},
        {"value": 5, "unit": "kg", "label": "5kg (Train)"},
    ],
    Event.DISCUS: [
        {"value": 2, "unit": "kg", "label": "2kg (M)"},
        {"value": 1, "unit": "kg", "label": "1kg (W)"},
        {"value": 1.75, "unit": "kg", "label": "1.75kg (HS)"},
        {"value": 1.5, "unit": "kg", "label": "1.5kg (Train)"},
    ],
    Event.HAMMER: [
        {"value": 7.26, "unit": "kg", "label": "7.26kg (M)"},
        {"value": 4, "unit": "kg", "label": "4kg (W)"},
        {"value": 6, "unit": "kg", "label": "6kg (Train)"},
        {"value": 5, "unit": "kg", "label": "5kg (Train)"},
    ],
    Event.JAVELIN: [
        {"value": 800, "unit": "g", "label": "800g (M)"},
        {"value": 600, "unit": "g", "label": "600g (W)"},
        {"value": 700, "unit": "g", "label": "700g (Train)"},
        {"value": 500, "unit": "g", "label": "500g (Train)"},
    ],
}


def event_name(event: Event | str) -> str:
    """Get the display name of an event."""
    return EVENT_NAMES[Event(event)]


def event_icon(event: Event | str) -> str:
    """Get the icon of an event."""
    return EVENT_ICONS[Event(event)]


def session_type_icon(session_type: SessionType | str) -> str:
    """Get the icon of a session type."""
    return SESSION_TYPE_ICONS[SessionType(session_type)]


def rpe_descriptor(rpe: int) -> str:
    """Describe an RPE value (1-10).

    Raises:
        KeyError: If rpe is outside 1-10
    """
    return RPE_DESCRIPTORS[rpe]


def format_date_with_day_of_week(date_value: str) -> str:
    """Format a date string for display (e.g., "Sun, Oct 18").

    Args:
        date_value: Date string in ISO-8601 format (YYYY-MM-DD)

    Returns:
        Short weekday/month/day string, or the original value if parsing fails
    """
    if not date_value:
        return date_value

    try:
        date_obj = datetime.strptime(date_value[:10], "%Y-%m-%d")
    except ValueError:
        return date_value
    return f"{date_obj.strftime('%a, %b')} {date_obj.day}"


def _add_field(lines: list[str], label: str, value: Any, unit: str = "") -> None:
    """Add a field to lines only if value is not None/empty."""
    if value is not None and value != "":
        lines.append(f"{label}: {value}{unit}")


def format_weight(value: float | None, unit: str) -> str | None:
    """Format an implement weight or PR distance, dropping a trailing .0."""
    if value is None:
        return None
    number = int(value) if float(value).is_integer() else value
    return f"{number}{unit}"


def format_session_summary(session: Session) -> str:
    """Format a session as a single list line."""
    pr_marker = " 🏅 PR" if session.pr_day else ""
    return (
        f"{event_icon(session.event)} {format_date_with_day_of_week(session.date)} - "
        f"{event_name(session.event)} {session_type_icon(session.session_type)} "
        f"{session.session_type.value}, {session.throw_count} throws @ RPE {session.rpe} "
        f"(load {compute_load(session)}){pr_marker} [id: {session.id}]"
    )


def format_session_details(session: Session) -> str:
    """Format a session into a readable string, showing only non-empty fields."""
    lines = [f"Session: {event_name(session.event)} - {session.date}"]

    _add_field(lines, "ID", session.id)
    _add_field(lines, "Date", format_date_with_day_of_week(session.date))
    _add_field(lines, "Type", session.session_type.value.capitalize())
    _add_field(lines, "Season", session.season.value.capitalize())
    _add_field(lines, "Throws", session.throw_count)
    _add_field(lines, "Implement", format_weight(session.implement_weight, session.weight_unit.value))
    _add_field(lines, "RPE", f"{session.rpe} ({rpe_descriptor(session.rpe)})")
    _add_field(lines, "Load", compute_load(session))

    if session.pr_day:
        distance = format_weight(session.pr_distance, f" {session.distance_unit.value}")
        _add_field(lines, "PR", distance or "Yes")

    _add_field(lines, "Notes", session.notes)
    _add_field(lines, "Coach Notes", session.coach_notes)
    _add_field(lines, "Logged", session.created_at)

    return "\n".join(lines)


def format_stats_block(title: str, stats: dict[str, Any]) -> list[str]:
    """Format a summary_stats() result as indented lines."""
    return [
        f"{title}:",
        f"  Sessions: {stats['total_sessions']}",
        f"  Throws: {stats['total_throws']}",
        f"  Avg RPE: {stats['avg_rpe']}",
        f"  PRs: {stats['pr_count']}",
    ]


def format_percent_change(percentage: int) -> str:
    """Format a percent change with an explicit sign for non-negative values."""
    prefix = "+" if percentage >= 0 else ""
    return f"{prefix}{percentage}%"
