from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


class CatalogItem(BaseModel):
    """A playable item from the media library."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Title of the media")
    duration_seconds: float = Field(..., description="Runtime in seconds")
    group_title: str | None = Field(
        None, description="Grouping title such as the series name, if any"
    )


class ScheduledEvent(BaseModel):
    """A catalog item placed on the weekly timetable.

    Day indices count from the first day of the timetable. An event whose
    ``start_day_index`` differs from its ``end_day_index`` plays through
    midnight; it is stored once and split into segments only by renderers.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    group_title: str | None = None
    start_day_index: int
    start_hour: int = Field(..., ge=0, le=23)
    start_minute: int = Field(..., ge=0, le=59)
    end_day_index: int
    end_hour: int = Field(..., ge=0, le=23)
    end_minute: int = Field(..., ge=0, le=59)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def composed_title(self) -> str:
        if self.group_title:
            return f"{self.group_title}: {self.title}"
        return self.title

    @property
    def start_linear_minutes(self) -> int:
        return (
            self.start_day_index * MINUTES_PER_DAY
            + self.start_hour * MINUTES_PER_HOUR
            + self.start_minute
        )

    @property
    def end_linear_minutes(self) -> int:
        return (
            self.end_day_index * MINUTES_PER_DAY
            + self.end_hour * MINUTES_PER_HOUR
            + self.end_minute
        )


class ScheduleRequest(BaseModel):
    """Request to build the weekly timetable for a catalog."""

    catalog: list[CatalogItem] = Field(default_factory=list)
    now: datetime | None = Field(
        None,
        description="Reference time for the week anchor; defaults to the server clock",
    )
    seed: int | None = Field(
        None, description="Override the week anchor seed, e.g. to reproduce a past week"
    )
    clip: bool = Field(
        False, description="Re-index days from today and drop events outside the week"
    )
    debug: bool = Field(False, description="Enable debug logging for this request")


class ScheduleResponse(BaseModel):
    seed: int
    week_start: date
    events: list[ScheduledEvent] = Field(default_factory=list)


class NowPlayingRequest(BaseModel):
    """Request to find the event airing at a time of day on day index 0."""

    events: list[ScheduledEvent] = Field(default_factory=list)
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)


class NowPlayingResponse(BaseModel):
    event: ScheduledEvent | None = None


class DaySegment(BaseModel):
    """The part of an event drawn inside a single day column."""

    title: str
    composed_title: str
    start_minute_of_day: int
    end_minute_of_day: int
    continued_from_previous_day: bool = False
    continues_next_day: bool = False


class DayColumn(BaseModel):
    day_index: int
    date: date
    title: str
    segments: list[DaySegment] = Field(default_factory=list)


class GridResponse(BaseModel):
    seed: int
    days: list[DayColumn] = Field(default_factory=list)
    now_marker_minutes: int
    now_playing: ScheduledEvent | None = None
