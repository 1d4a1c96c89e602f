"""
Analytics modules for throwing session metrics.

This package contains the pure computation layer:
- Session load, calendar-week bucketing and weekly series
- Summary statistics, season and event breakdowns
- Week-over-week injury risk classification
- Consecutive-day logging streaks
- Graduated alerts
"""

__all__ = [
    "load",
    "stats",
    "risk",
    "streak",
    "alerts",
]
