"""Deterministic weekly timetable construction."""

from weeklytv.scheduling.errors import InvalidDurationError
from weeklytv.scheduling.now_playing import now_playing
from weeklytv.scheduling.packing import WeekSchedule, build_week_schedule, pack_events
from weeklytv.scheduling.shuffle import seeded_shuffle
from weeklytv.scheduling.week_seed import most_recent_sunday, resolve_week_anchor
from weeklytv.scheduling.window import clip_to_current_week, clip_to_window

__all__ = [
    "InvalidDurationError",
    "WeekSchedule",
    "build_week_schedule",
    "clip_to_current_week",
    "clip_to_window",
    "most_recent_sunday",
    "now_playing",
    "pack_events",
    "resolve_week_anchor",
    "seeded_shuffle",
]
