from __future__ import annotations

"""Projection of a timetable onto a seven-column day grid.

Renderers draw one column per day and one block per event segment. This
module does the calendar bookkeeping (which events touch a day, where their
segment starts and ends inside that day, column titles and the position of
the current-time marker) and leaves pixel layout to the renderer.
"""

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from weeklytv.api.models import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    DayColumn,
    DaySegment,
    ScheduledEvent,
)
from weeklytv.scheduling.window import WEEK_DAYS


def events_for_day(events: Sequence[ScheduledEvent], day_index: int) -> list[ScheduledEvent]:
    return [
        event
        for event in events
        if event.start_day_index <= day_index <= event.end_day_index
    ]


def day_segment(event: ScheduledEvent, day_index: int) -> DaySegment:
    """Clamp ``event`` to the minutes it occupies on ``day_index``."""

    continued = event.start_day_index < day_index
    continues = event.end_day_index > day_index

    start = 0 if continued else event.start_hour * MINUTES_PER_HOUR + event.start_minute
    end = MINUTES_PER_DAY if continues else event.end_hour * MINUTES_PER_HOUR + event.end_minute

    return DaySegment(
        title=event.title,
        composed_title=event.composed_title,
        start_minute_of_day=start,
        end_minute_of_day=end,
        continued_from_previous_day=continued,
        continues_next_day=continues,
    )


def day_title(start_date: date, day_index: int) -> str:
    return (start_date + timedelta(days=day_index)).strftime("%A").upper()


def now_marker_minutes(now: datetime) -> int:
    return now.hour * MINUTES_PER_HOUR + now.minute


def build_day_columns(
    events: Sequence[ScheduledEvent],
    start_date: date,
    *,
    days: int = WEEK_DAYS,
) -> list[DayColumn]:
    """Group ``events`` into ``days`` columns starting at ``start_date``.

    A cross-day event yields a segment on each day it touches. Segments that
    would be empty (an event ending exactly at midnight) are dropped from the
    later day.
    """

    columns: list[DayColumn] = []
    for day_index in range(days):
        segments = []
        for event in events_for_day(events, day_index):
            segment = day_segment(event, day_index)
            if segment.continued_from_previous_day and segment.end_minute_of_day == 0:
                continue
            segments.append(segment)
        columns.append(
            DayColumn(
                day_index=day_index,
                date=start_date + timedelta(days=day_index),
                title=day_title(start_date, day_index),
                segments=segments,
            )
        )
    return columns
