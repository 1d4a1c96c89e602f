"""Athlete settings and data management tools."""

import logging

from throwtracker_mcp_server.storage import StorageError, get_store
from throwtracker_mcp_server.utils.types import DistanceUnit, Event, WeightUnit
from throwtracker_mcp_server.mcp_instance import mcp

logger = logging.getLogger(__name__)


def _format_settings(settings: dict) -> str:
    return "\n".join([
        "Settings:",
        f"  Athlete name: {settings.get('athleteName') or '-'}",
        f"  Primary event: {settings.get('primaryEvent') or '-'}",
        f"  Default weight unit: {settings.get('weightUnit')}",
        f"  Default distance unit: {settings.get('distanceUnit')}",
    ])


@mcp.tool()
async def get_settings() -> str:
    """Get athlete settings."""
    try:
        settings = get_store().get_settings()
    except StorageError as e:
        logger.error("Error reading settings: %s", e)
        return f"Error reading settings: {e}"
    return _format_settings(settings)


@mcp.tool()
async def update_settings(
    athlete_name: str | None = None,
    primary_event: str | None = None,
    weight_unit: str | None = None,
    distance_unit: str | None = None,
) -> str:
    """Update athlete settings. Only the given fields change.

    Args:
        athlete_name: Athlete display name
        primary_event: One of shot-put, discus, hammer, javelin
        weight_unit: Default implement unit for new sessions (kg or g)
        distance_unit: Default PR distance unit (m or ft)
    """
    updates: dict[str, str] = {}
    if athlete_name is not None:
        updates["athleteName"] = athlete_name
    if primary_event is not None:
        if primary_event and primary_event not in {e.value for e in Event}:
            return f"Invalid primary event: {primary_event}"
        updates["primaryEvent"] = primary_event
    if weight_unit is not None:
        if weight_unit not in {u.value for u in WeightUnit}:
            return f"Invalid weight unit: {weight_unit}"
        updates["weightUnit"] = weight_unit
    if distance_unit is not None:
        if distance_unit not in {u.value for u in DistanceUnit}:
            return f"Invalid distance unit: {distance_unit}"
        updates["distanceUnit"] = distance_unit

    if not updates:
        return "No settings to update"

    try:
        settings = get_store().save_settings(updates)
    except StorageError as e:
        logger.error("Error saving settings: %s", e)
        return f"Error saving settings: {e}"
    return f"Settings saved.\n\n{_format_settings(settings)}"


@mcp.tool()
async def clear_all_data(confirm: bool = False) -> str:
    """Delete all sessions and the streak. Settings are kept.

    This cannot be undone.

    Args:
        confirm: Must be true to actually delete
    """
    if not confirm:
        return "Refusing to clear data without confirm=true. This cannot be undone."

    try:
        get_store().clear_all()
    except StorageError as e:
        logger.error("Error clearing data: %s", e)
        return f"Error clearing data: {e}"
    return "All data cleared"
