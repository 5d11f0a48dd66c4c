#!/usr/bin/env python3
"""Manual preview script for the weekly timetable.

Prints this week's guide, one section per day, either for the Plex library
configured in the environment or for a small built-in sample catalog.

Usage:
    python preview_schedule.py

Environment variables:
    WEEKLYTV_LIBRARY_DB: Plex library database to read (default: sample catalog)
    WEEKLYTV_TIMEZONE: IANA zone for "now" (default: machine local zone)
    WEEKLYTV_DEBUG: Enable debug logging (1, true, yes)
"""

from weeklytv.api.models import CatalogItem
from weeklytv.catalog.plex import read_catalog
from weeklytv.config import get_settings, is_debug_enabled, local_now
from weeklytv.logging import configure_logging
from weeklytv.scheduling import build_week_schedule, now_playing
from weeklytv.scheduling.grid import build_day_columns

SAMPLE_CATALOG = [
    CatalogItem(title="Burning", duration_seconds=8880),
    CatalogItem(title="Last Exit to Brooklyn", duration_seconds=6120),
    CatalogItem(title="Microbe and Gasoline", duration_seconds=6180),
    CatalogItem(title="Milford Graves Full Mantis", duration_seconds=5460),
    CatalogItem(title="Mystery Train", duration_seconds=6360),
    CatalogItem(title="Pin", duration_seconds=6180),
    CatalogItem(title="The Passionate Thief", duration_seconds=6360),
    CatalogItem(title="Lovers Rock", duration_seconds=5700),
    CatalogItem(title="To Live and Die in L.A.", duration_seconds=6960),
    CatalogItem(title="Pilot", duration_seconds=5640, group_title="Twin Peaks"),
    CatalogItem(title="Traces to Nowhere", duration_seconds=2880, group_title="Twin Peaks"),
]


def print_section(title: str) -> None:
    """Print a formatted section header."""
    print(f"\n{'=' * 70}")
    print(f"  {title}")
    print(f"{'=' * 70}\n")


def _clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def main() -> None:
    configure_logging()
    settings = get_settings()
    debug = is_debug_enabled()

    if settings.library_db:
        catalog = read_catalog(settings.library_db, debug=debug)
    else:
        catalog = SAMPLE_CATALOG

    now = local_now()
    week = build_week_schedule(catalog, now, clip=True, debug=debug)

    print_section(f"Week of {week.week_start} (seed {week.seed})")
    playing = now_playing(week.events, now.hour, now.minute)
    if playing:
        print(f"Now playing: {playing.composed_title}")
    print(f"Catalog items: {len(catalog)}  Events this week: {len(week.events)}")

    for column in build_day_columns(week.events, now.date()):
        print_section(f"{column.title} {column.date}")
        if not column.segments:
            print("  (nothing scheduled)")
        for segment in column.segments:
            marker = "…" if segment.continued_from_previous_day else " "
            print(
                f" {marker}{_clock(segment.start_minute_of_day)}-"
                f"{_clock(segment.end_minute_of_day)}  {segment.composed_title}"
            )


if __name__ == "__main__":
    main()
