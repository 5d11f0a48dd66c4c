from __future__ import annotations

from collections.abc import Iterable

from weeklytv.api.models import ScheduledEvent


def _airs_at(event: ScheduledEvent, hour: int, minute: int) -> bool:
    if event.start_hour == hour:
        return event.start_minute <= minute and (
            event.end_hour != hour or event.end_minute >= minute
        )
    if event.end_hour == hour:
        return event.end_minute >= minute
    return event.end_hour > hour


def now_playing(
    events: Iterable[ScheduledEvent], hour: int, minute: int
) -> ScheduledEvent | None:
    """Return the first day-0 event airing at ``hour:minute``, if any.

    Events are checked in timetable order; only events starting on day index 0
    are considered.
    """

    for event in events:
        if event.start_day_index != 0:
            continue
        if _airs_at(event, hour, minute):
            return event
    return None
