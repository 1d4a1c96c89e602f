"""Graduated alerts for load and consistency."""

from dataclasses import asdict, dataclass
from typing import Any

from throwtracker_mcp_server.analytics.risk import DANGER_THRESHOLD, WARNING_THRESHOLD

LOAD_DANGER_MESSAGE = (
    "Weekly load increased by more than 20%. "
    "Consider reducing intensity to prevent injury."
)
LOAD_WARNING_MESSAGE = "Moderate load increase - monitor closely"
STREAK_LAPSED_MESSAGE = "Logging streak broken - log a session today to start a new one"

SEVERITY_ORDER = {"alarm": 0, "warning": 1}


@dataclass(frozen=True)
class Alert:
    """Training alert.

    Attributes:
        severity: "warning" or "alarm"
        category: "load" or "consistency"
        metric: Metric that triggered the alert
        value: Current metric value
        threshold: Threshold the value crossed
        message: Advisory text for the athlete
    """

    severity: str
    category: str
    metric: str
    value: int
    threshold: int
    message: str


def _load_alert(load_risk: dict[str, Any]) -> Alert | None:
    percentage = load_risk.get("percentage", 0)
    level = load_risk.get("level")
    if level == "danger":
        return Alert("alarm", "load", "weekly_load_change", percentage, DANGER_THRESHOLD, LOAD_DANGER_MESSAGE)
    if level == "warning":
        return Alert("warning", "load", "weekly_load_change", percentage, WARNING_THRESHOLD, LOAD_WARNING_MESSAGE)
    return None


def generate_alerts(metrics: dict[str, Any]) -> list[dict[str, Any]]:
    """Generate graduated alerts from derived metrics.

    Reads:
    - "load_risk": LoadRisk.to_dict() output; alarm above 20%, warning above 10%
    - "streak" with "sessions_count": a warning when sessions exist but the
      streak is 0 (an athlete who never logged gets no alert)

    Args:
        metrics: Dictionary of derived metrics

    Returns:
        List of alert dictionaries, alarms first
    """
    alerts: list[Alert] = []

    load_risk = metrics.get("load_risk")
    if load_risk is not None:
        alert = _load_alert(load_risk)
        if alert:
            alerts.append(alert)

    if metrics.get("streak") == 0 and metrics.get("sessions_count", 0) > 0:
        alerts.append(Alert("warning", "consistency", "streak", 0, 1, STREAK_LAPSED_MESSAGE))

    alerts.sort(key=lambda a: SEVERITY_ORDER.get(a.severity, 2))
    return [asdict(alert) for alert in alerts]


def count_alerts_by_severity(alerts: list[dict[str, Any]]) -> dict[str, int]:
    """Count alerts per severity; both severities are always present."""
    counts = dict.fromkeys(SEVERITY_ORDER, 0)
    for alert in alerts:
        if alert.get("severity") in counts:
            counts[alert["severity"]] += 1
    return counts
