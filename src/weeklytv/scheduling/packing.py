from __future__ import annotations

"""Back-to-back packing of catalog items into the weekly timetable."""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from weeklytv.api.models import CatalogItem, ScheduledEvent
from weeklytv.scheduling.errors import InvalidDurationError
from weeklytv.scheduling.shuffle import seeded_shuffle
from weeklytv.scheduling.week_seed import most_recent_sunday, encode_anchor
from weeklytv.scheduling.window import clip_to_current_week


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekSchedule:
    """Result of a single timetable build."""

    seed: int
    week_start: date
    events: tuple[ScheduledEvent, ...]


def whole_minutes(duration_seconds: float) -> int:
    """Truncate a duration in seconds to whole minutes."""

    return int(duration_seconds // 60)


def validate_catalog(catalog: Iterable[CatalogItem]) -> None:
    for item in catalog:
        duration = item.duration_seconds
        if not math.isfinite(duration) or duration < 0:
            raise InvalidDurationError(item.title, duration)


def pack_events(items: Sequence[CatalogItem], *, debug: bool = False) -> list[ScheduledEvent]:
    """Lay ``items`` end to end from day 0, 00:00 in the order given.

    Each event starts where the previous one ended. Hours past midnight roll
    into the day index, so an event may end on a later day than it starts.
    """

    validate_catalog(items)

    events: list[ScheduledEvent] = []
    day_index = 0
    hour = 0
    minute = 0

    for item in items:
        plus_hours, plus_minutes = divmod(whole_minutes(item.duration_seconds), 60)
        end_hour = hour + plus_hours
        end_minute = minute + plus_minutes
        if end_minute >= 60:
            end_hour += 1
            end_minute -= 60

        days_advanced, end_hour = divmod(end_hour, 24)
        start_day_index = day_index
        day_index += days_advanced

        event = ScheduledEvent(
            title=item.title,
            group_title=item.group_title,
            start_day_index=start_day_index,
            start_hour=hour,
            start_minute=minute,
            end_day_index=day_index,
            end_hour=end_hour,
            end_minute=end_minute,
        )
        if debug:
            logger.debug(
                "Packed '%s': day %s %02d:%02d -> day %s %02d:%02d",
                event.composed_title,
                start_day_index,
                hour,
                minute,
                day_index,
                end_hour,
                end_minute,
            )
        events.append(event)

        hour = end_hour
        minute = end_minute

    return events


def build_week_schedule(
    catalog: Sequence[CatalogItem],
    now: datetime,
    *,
    seed: int | None = None,
    clip: bool = False,
    debug: bool = False,
) -> WeekSchedule:
    """Build the timetable for the week containing ``now``.

    The catalog is shuffled with the week anchor (or an explicit ``seed``) and
    packed from the start of the anchor Sunday. With ``clip`` set, day indices
    are re-expressed relative to ``now``'s day and events outside the
    following seven days are dropped.
    """

    validate_catalog(catalog)

    week_start = most_recent_sunday(now)
    if seed is None:
        seed = encode_anchor(week_start)

    logger.info(
        "Building week schedule: %s catalog items, seed=%s, clip=%s",
        len(catalog),
        seed,
        clip,
    )

    events = pack_events(seeded_shuffle(catalog, seed), debug=debug)
    if clip:
        events = clip_to_current_week(events, now)

    logger.info("Built %s scheduled events for week starting %s", len(events), week_start)
    return WeekSchedule(seed=seed, week_start=week_start, events=tuple(events))
