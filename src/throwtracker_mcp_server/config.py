"""
Configuration for the ThrowTracker MCP Server.

Settings come from environment variables, optionally loaded from a .env file.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_FILE = Path.home() / ".throwtracker" / "data.json"


@dataclass
class Config:
    """Server configuration."""

    data_file: Path
    weight_unit: str = "kg"
    distance_unit: str = "m"
    chart_weeks: int = 8
    log_level: str = "INFO"
    transport: str = "stdio"


def load_config() -> Config:
    """Read configuration from the environment."""
    return Config(
        data_file=Path(os.getenv("THROWTRACKER_DATA_FILE", str(DEFAULT_DATA_FILE))).expanduser(),
        weight_unit=os.getenv("WEIGHT_UNIT", "kg"),
        distance_unit=os.getenv("DISTANCE_UNIT", "m"),
        chart_weeks=int(os.getenv("CHART_WEEKS", "8")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        transport=os.getenv("MCP_TRANSPORT", "stdio"),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the process-wide configuration instance."""
    return load_config()
