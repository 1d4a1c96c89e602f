"""
JSON file storage for sessions, settings and the streak cache.

The whole store is one JSON document:
    {"sessions": [...], "settings": {...}, "streak": {...}}
"""

import json
import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Any

from throwtracker_mcp_server.config import get_config
from throwtracker_mcp_server.utils.types import Session

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "weightUnit": "kg",
    "distanceUnit": "m",
    "athleteName": "",
    "primaryEvent": "",
}

DEFAULT_STREAK = {"current": 0, "lastLogDate": None}


class StorageError(Exception):
    """Raised when the data file cannot be read or written."""


class SessionStore:
    """Session store backed by a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Corrupt data file %s: %s", self.path, e)
            raise StorageError(f"Data file {self.path} is not valid JSON: {e}") from e
        except OSError as e:
            logger.error("Error reading %s: %s", self.path, e)
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Data file {self.path} does not contain a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Saved data file %s", self.path)

    def _raw_sessions(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        sessions = data.get("sessions", [])
        if not isinstance(sessions, list) or not all(isinstance(item, dict) for item in sessions):
            logger.error("Malformed sessions list in %s", self.path)
            raise StorageError(f"Malformed sessions list in {self.path}: expected a list of objects")
        return sessions

    def get_sessions(self) -> list[Session]:
        """Get all sessions, newest insertion first."""
        raw_sessions = self._raw_sessions(self._read())
        try:
            return [Session.from_dict(item) for item in raw_sessions]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed session record in %s: %s", self.path, e)
            raise StorageError(f"Malformed session record in {self.path}: {e}") from e

    def add_session(self, session: Session) -> Session:
        """Store a new session, assigning its id and creation timestamp.

        Args:
            session: Session to store (id and created_at are replaced)

        Returns:
            The stored session
        """
        data = self._read()
        sessions = self._raw_sessions(data)
        existing_ids = {str(item.get("id")) for item in sessions}

        # Millisecond timestamps, bumped on collision
        new_id = int(time.time() * 1000)
        while str(new_id) in existing_ids:
            new_id += 1

        stored = Session.from_dict({
            **session.to_dict(),
            "id": str(new_id),
            "createdAt": datetime.now().isoformat(timespec="milliseconds"),
        })
        data["sessions"] = [stored.to_dict(), *sessions]
        self._write(data)
        logger.info("Logged session %s (%s, %s)", stored.id, stored.event.value, stored.date)
        return stored

    def delete_session(self, session_id: str) -> bool:
        """Delete a session by id.

        Returns:
            True if a session was removed
        """
        data = self._read()
        sessions = self._raw_sessions(data)
        remaining = [item for item in sessions if str(item.get("id")) != session_id]
        if len(remaining) == len(sessions):
            return False

        data["sessions"] = remaining
        self._write(data)
        logger.info("Deleted session %s", session_id)
        return True

    def get_settings(self) -> dict[str, Any]:
        """Get athlete settings, filled with defaults."""
        return {**DEFAULT_SETTINGS, **self._read().get("settings", {})}

    def save_settings(self, settings: dict[str, Any]) -> dict[str, Any]:
        """Merge and save athlete settings.

        Returns:
            The full settings after the update
        """
        data = self._read()
        merged = {**DEFAULT_SETTINGS, **data.get("settings", {}), **settings}
        data["settings"] = merged
        self._write(data)
        return merged

    def get_streak(self) -> dict[str, Any]:
        """Get the cached streak. Not authoritative; recompute from sessions."""
        return {**DEFAULT_STREAK, **self._read().get("streak", {})}

    def save_streak(self, current: int, last_log_date: str | None) -> None:
        """Update the cached streak."""
        data = self._read()
        data["streak"] = {"current": current, "lastLogDate": last_log_date}
        self._write(data)

    def clear_all(self) -> None:
        """Remove all sessions and the streak cache. Settings are kept."""
        data = self._read()
        data.pop("sessions", None)
        data.pop("streak", None)
        self._write(data)
        logger.info("Cleared all session data in %s", self.path)


def get_store() -> SessionStore:
    """Get a store for the configured data file."""
    return SessionStore(get_config().data_file)
