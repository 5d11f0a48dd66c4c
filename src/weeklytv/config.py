from __future__ import annotations

"""Runtime configuration helpers for WeeklyTV.

This module centralizes environment-driven settings so the library database,
the broadcast time zone and window clipping can be controlled without code
changes. Defaults favor the machine's local clock since the weekly timetable
is anchored to the viewer's calendar.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo


logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings derived from environment variables."""

    library_db: str | None
    timezone: str | None
    clip_window: bool
    debug_enabled: bool


def _env_flag(name: str, default: bool = False) -> bool:
    """Return a boolean flag controlled by an environment variable."""

    raw_value = os.getenv(name)
    if raw_value is None:
        return default

    return raw_value.strip().lower() in {"1", "true", "yes", "on", "y"}


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment with sensible defaults."""

    settings = Settings(
        library_db=os.getenv("WEEKLYTV_LIBRARY_DB") or None,
        timezone=os.getenv("WEEKLYTV_TIMEZONE") or None,
        clip_window=_env_flag("WEEKLYTV_CLIP_WINDOW", True),
        debug_enabled=_env_flag("WEEKLYTV_DEBUG", False),
    )
    logger.info(
        "Loaded settings: library_db=%s timezone=%s clip_window=%s debug=%s",
        settings.library_db,
        settings.timezone or "local",
        settings.clip_window,
        settings.debug_enabled,
    )
    return settings


def is_debug_enabled(request_debug: bool = False) -> bool:
    """Resolve whether debug logging should be enabled for a request.

    Debug logging can be toggled either via the request payload or by setting the
    ``WEEKLYTV_DEBUG`` environment variable.
    """

    return request_debug or get_settings().debug_enabled


def broadcast_timezone() -> tzinfo | None:
    """Return the configured zone, or ``None`` for the machine's local zone."""

    name = get_settings().timezone
    if not name:
        return None
    return ZoneInfo(name)


def local_now() -> datetime:
    """Current wall-clock time in the broadcast time zone."""

    tz = broadcast_timezone()
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def to_broadcast_time(moment: datetime | None) -> datetime:
    """Express ``moment`` on the broadcast calendar, defaulting to the current time.

    Aware datetimes are converted into the broadcast zone so the week anchor,
    the day offset and the time of day all come from the same calendar. Naive
    datetimes are taken to already be broadcast wall-clock time.
    """

    if moment is None:
        return local_now()
    if moment.tzinfo is None:
        return moment

    tz = broadcast_timezone()
    if tz is None:
        return moment.astimezone()
    return moment.astimezone(tz)
