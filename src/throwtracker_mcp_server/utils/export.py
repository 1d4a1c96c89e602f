"""CSV and JSON export of session data."""

import csv
import io
import json
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from throwtracker_mcp_server.analytics.load import compute_load
from throwtracker_mcp_server.utils.formatting import event_name
from throwtracker_mcp_server.utils.types import Session

BACKUP_VERSION = "1.0.0"

CSV_HEADERS = [
    "Date",
    "Event",
    "Session Type",
    "Season",
    "Throws",
    "Implement Weight",
    "Weight Unit",
    "RPE",
    "PR Day",
    "PR Distance",
    "Distance Unit",
    "Notes",
    "Coach Notes",
    "Load (Throws × RPE)",
]


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def sessions_to_csv(sessions: Sequence[Session]) -> str:
    """Render sessions as CSV with a header row.

    Args:
        sessions: Session records, exported in the given order

    Returns:
        CSV text, or an empty string when there are no sessions
    """
    if not sessions:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for session in sessions:
        writer.writerow([
            session.date,
            event_name(session.event),
            session.session_type.value,
            session.season.value,
            session.throw_count,
            _blank_if_none(session.implement_weight),
            session.weight_unit.value,
            session.rpe,
            "Yes" if session.pr_day else "No",
            _blank_if_none(session.pr_distance),
            session.distance_unit.value if session.pr_distance is not None else "",
            session.notes,
            session.coach_notes,
            compute_load(session),
        ])

    return buffer.getvalue()


def build_backup(
    sessions: Sequence[Session],
    settings: dict[str, Any],
    streak: dict[str, Any],
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build a full backup document.

    Args:
        sessions: Session records
        settings: Athlete settings
        streak: Cached streak
        now: Export timestamp (default: system clock)

    Returns:
        Backup dictionary
    """
    export_time = now or datetime.now()
    return {
        "sessions": [s.to_dict() for s in sessions],
        "settings": settings,
        "streak": streak,
        "exportDate": export_time.isoformat(timespec="seconds"),
        "version": BACKUP_VERSION,
    }


def format_backup_as_json(backup: dict[str, Any]) -> str:
    """Format a backup document as indented JSON."""
    return json.dumps(backup, indent=2, ensure_ascii=False)
