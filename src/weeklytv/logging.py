from __future__ import annotations

"""Centralized logging configuration for WeeklyTV.

Schedule builds, library reads and API requests all log through the root
logger with one timestamped format. Setting ``WEEKLYTV_DEBUG`` turns on the
per-event packing trace. Calling this more than once is harmless.
"""

import logging
import os
from typing import Final


LOG_FORMAT: Final = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure root logging with sensible defaults if not already configured."""

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.getenv("WEEKLYTV_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
