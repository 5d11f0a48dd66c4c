from __future__ import annotations

"""Optional view windowing for a packed timetable.

The packed timetable counts days from the anchor Sunday. A week view that
starts today instead shifts every day index back by the number of days since
that Sunday, so today becomes day index 0, and keeps only events touching the
seven visible days.
"""

from collections.abc import Sequence
from datetime import date, datetime

from weeklytv.api.models import ScheduledEvent
from weeklytv.scheduling.week_seed import days_since_sunday

WEEK_DAYS = 7


def clip_to_window(
    events: Sequence[ScheduledEvent],
    offset: int,
    *,
    days: int = WEEK_DAYS,
) -> list[ScheduledEvent]:
    """Shift day indices down by ``offset`` and drop events outside ``[0, days)``.

    An event is kept when any part of it lies in the window, which covers both
    a start inside the window and an end inside it.
    """

    clipped: list[ScheduledEvent] = []
    for event in events:
        start = event.start_day_index - offset
        end = event.end_day_index - offset
        if start >= days or end < 0:
            continue
        clipped.append(
            event.model_copy(update={"start_day_index": start, "end_day_index": end})
        )
    return clipped


def clip_to_current_week(
    events: Sequence[ScheduledEvent], now: date | datetime
) -> list[ScheduledEvent]:
    today = now.date() if isinstance(now, datetime) else now
    return clip_to_window(events, days_since_sunday(today))
