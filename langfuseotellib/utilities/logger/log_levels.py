import logging
import os
from typing import Dict, Optional

DEFAULT_LOG_LEVEL: str = "INFO"


def get_log_level(value: Optional[str], default: str = DEFAULT_LOG_LEVEL) -> str:
    """
    Normalize a log level name, falling back to default for names logging does not know.

    Args:
        value: Level name such as "debug" or "WARNING"
        default: Level name to use when value is missing or unknown

    Returns:
        Upper-case level name accepted by Logger.setLevel
    """
    if not value or not value.strip():
        return default
    level = value.strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


# Global level; individual areas may override it with <AREA>_LOG_LEVEL
GLOBAL_LOG_LEVEL: str = get_log_level(os.environ.get("LOG_LEVEL"))

_LOG_AREAS = ["OPEN_TELEMETRY", "INITIALIZATION"]

SRC_LOG_LEVELS: Dict[str, str] = {
    area: get_log_level(os.environ.get(f"{area}_LOG_LEVEL"), GLOBAL_LOG_LEVEL)
    for area in _LOG_AREAS
}
