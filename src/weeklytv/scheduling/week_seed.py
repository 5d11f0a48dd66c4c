"""Week anchor resolution.

Every viewer building the timetable during the same Sunday–Saturday week gets
the same seed: the most recent Sunday (today included) encoded as ``YYYYMMDD``.
Only calendar dates are compared, so daylight-saving shifts inside the week
never move the anchor.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from weeklytv.config import local_now


def days_since_sunday(day: date) -> int:
    """Sunday is 0, Monday 1, ... Saturday 6."""

    return day.isoweekday() % 7


def _as_date(moment: date | datetime | None) -> date:
    if moment is None:
        moment = local_now()
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def most_recent_sunday(moment: date | datetime | None = None) -> date:
    today = _as_date(moment)
    return today - timedelta(days=days_since_sunday(today))


def encode_anchor(day: date) -> int:
    return int(day.strftime("%Y%m%d"))


def resolve_week_anchor(moment: date | datetime | None = None) -> int:
    """Return the week seed for ``moment`` (defaults to the broadcast clock).

    Aware datetimes are read in their own zone; convert them to the broadcast
    zone first if they were produced elsewhere.
    """

    return encode_anchor(most_recent_sunday(moment))
