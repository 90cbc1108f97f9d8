"""
Environment-driven settings.

MOTIVATOR_TZ        IANA timezone used to decide what "today" is (default: local time).
MOTIVATOR_LOG_LEVEL logging level name (default: INFO).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class Settings:
    timezone: ZoneInfo | None
    log_level: int


def _parse_timezone(name: str | None) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise RuntimeError(f"MOTIVATOR_TZ is not a known timezone: {name!r}") from e


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise RuntimeError(f"MOTIVATOR_LOG_LEVEL is not a logging level: {name!r}")
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment once per process."""
    return Settings(
        timezone=_parse_timezone(os.environ.get("MOTIVATOR_TZ")),
        log_level=_parse_log_level(os.environ.get("MOTIVATOR_LOG_LEVEL", "INFO")),
    )
