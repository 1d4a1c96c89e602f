"""
Validation utilities for the ThrowTracker MCP Server.

Incoming session data is checked here, before it reaches storage or the
analytics, which both assume well-formed records.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from throwtracker_mcp_server.utils.types import (
    DistanceUnit,
    Event,
    Season,
    Session,
    SessionType,
    WeightUnit,
)


def _choices(enum_cls: type[Enum]) -> str:
    return ", ".join(member.value for member in enum_cls)


def validate_date(date_str: str) -> str:
    """Validate a YYYY-MM-DD date string.

    Returns:
        The date in canonical YYYY-MM-DD form

    Raises:
        ValueError: If the date is not a valid calendar date
    """
    try:
        parsed = datetime.strptime(date_str, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date format: {date_str}. Please use YYYY-MM-DD.") from e
    return parsed.isoformat()


def _check_enum(enum_cls: type[Enum], value: Any, label: str) -> str | None:
    try:
        enum_cls(value)
    except ValueError:
        return f"Invalid {label}: {value}. Expected one of: {_choices(enum_cls)}."
    return None


def resolve_session_payload(payload: dict[str, Any]) -> tuple[Session | None, str | None]:
    """Build a session from user-supplied data, checking its invariants.

    Args:
        payload: Session fields in stored (camelCase) form; id and createdAt
            are ignored and assigned by storage

    Returns:
        Tuple of (session or None, error message or None)
    """
    try:
        session_date = validate_date(payload.get("date", ""))
    except ValueError as e:
        return None, str(e)

    for enum_cls, key, label in (
        (Event, "event", "event"),
        (SessionType, "sessionType", "session type"),
        (Season, "season", "season"),
        (WeightUnit, "weightUnit", "weight unit"),
        (DistanceUnit, "distanceUnit", "distance unit"),
    ):
        error = _check_enum(enum_cls, payload.get(key), label)
        if error:
            return None, error

    throw_count = payload.get("throwCount")
    if isinstance(throw_count, bool) or not isinstance(throw_count, int) or throw_count <= 0:
        return None, f"Invalid throw count: {throw_count}. Must be a positive integer."

    rpe = payload.get("rpe")
    if isinstance(rpe, bool) or not isinstance(rpe, int) or not 1 <= rpe <= 10:
        return None, f"Invalid RPE: {rpe}. Must be an integer from 1 to 10."

    implement_weight = payload.get("implementWeight")
    if implement_weight is not None and implement_weight <= 0:
        return None, f"Invalid implement weight: {implement_weight}. Must be positive."

    pr_distance = payload.get("prDistance")
    if not payload.get("prDay"):
        pr_distance = None
    elif pr_distance is not None and pr_distance <= 0:
        return None, f"Invalid PR distance: {pr_distance}. Must be positive."

    session = Session.from_dict({
        **payload,
        "id": "",
        "date": session_date,
        "createdAt": "",
        "prDistance": pr_distance,
    })
    return session, None
