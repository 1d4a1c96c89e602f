"""
Type definitions for the ThrowTracker MCP Server.

Sessions are stored with camelCase keys; the Session dataclass exposes them
with Python names and converts in both directions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Event(str, Enum):
    """Throwing event."""

    SHOT_PUT = "shot-put"
    DISCUS = "discus"
    HAMMER = "hammer"
    JAVELIN = "javelin"


class SessionType(str, Enum):
    """Kind of training session."""

    TECHNIQUE = "technique"
    POWER = "power"
    COMPETITION = "competition"
    RECOVERY = "recovery"


class Season(str, Enum):
    """Competition season a session belongs to."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"


class WeightUnit(str, Enum):
    """Unit of the implement weight."""

    KG = "kg"
    G = "g"


class DistanceUnit(str, Enum):
    """Unit of a PR distance."""

    M = "m"
    FT = "ft"


class RiskLevel(str, Enum):
    """Week-over-week load change classification."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Session:
    """A single logged training session.

    Attributes:
        id: Opaque identifier, stable for the record's lifetime
        date: Calendar date of the session (YYYY-MM-DD)
        event: Throwing event
        session_type: Kind of session
        season: Indoor or outdoor season
        throw_count: Number of throws performed
        rpe: Rate of Perceived Exertion (1-10)
        implement_weight: Implement weight, descriptive only
        weight_unit: Unit of implement_weight
        pr_day: Whether a personal record was set
        pr_distance: PR distance, only meaningful on PR days
        distance_unit: Unit of pr_distance
        notes: Athlete notes
        coach_notes: Coach notes
        created_at: Creation timestamp (ISO-8601), audit only
    """

    id: str
    date: str
    event: Event
    session_type: SessionType
    season: Season
    throw_count: int
    rpe: int
    implement_weight: float | None = None
    weight_unit: WeightUnit = WeightUnit.KG
    pr_day: bool = False
    pr_distance: float | None = None
    distance_unit: DistanceUnit = DistanceUnit.M
    notes: str = ""
    coach_notes: str = ""
    created_at: str = field(default="", compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Session":
        """Build a session from its stored (camelCase) form."""
        pr_distance = data.get("prDistance")
        implement_weight = data.get("implementWeight")
        return cls(
            id=str(data.get("id", "")),
            date=data["date"],
            event=Event(data["event"]),
            session_type=SessionType(data["sessionType"]),
            season=Season(data.get("season", Season.INDOOR.value)),
            throw_count=int(data["throwCount"]),
            rpe=int(data["rpe"]),
            implement_weight=float(implement_weight) if implement_weight not in (None, "") else None,
            weight_unit=WeightUnit(data.get("weightUnit") or WeightUnit.KG.value),
            pr_day=bool(data.get("prDay", False)),
            pr_distance=float(pr_distance) if pr_distance not in (None, "") else None,
            distance_unit=DistanceUnit(data.get("distanceUnit") or DistanceUnit.M.value),
            notes=data.get("notes") or "",
            coach_notes=data.get("coachNotes") or "",
            created_at=data.get("createdAt") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert session to its stored (camelCase) form."""
        return {
            "id": self.id,
            "date": self.date,
            "event": self.event.value,
            "sessionType": self.session_type.value,
            "season": self.season.value,
            "throwCount": self.throw_count,
            "implementWeight": self.implement_weight,
            "weightUnit": self.weight_unit.value,
            "rpe": self.rpe,
            "prDay": self.pr_day,
            "prDistance": self.pr_distance,
            "distanceUnit": self.distance_unit.value,
            "notes": self.notes,
            "coachNotes": self.coach_notes,
            "createdAt": self.created_at,
        }
