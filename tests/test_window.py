"""Unit tests for the week view windowing stage."""

from __future__ import annotations

from datetime import date, datetime

from weeklytv.api.models import ScheduledEvent
from weeklytv.scheduling.window import clip_to_current_week, clip_to_window


def _event(title: str, start_day: int, end_day: int, start_hour: int = 0, end_hour: int = 1):
    return ScheduledEvent(
        title=title,
        start_day_index=start_day,
        start_hour=start_hour,
        start_minute=0,
        end_day_index=end_day,
        end_hour=end_hour,
        end_minute=0,
    )


class TestClipToWindow:
    """Tests for shifting and clipping to a seven-day window."""
    def test_zero_offset_keeps_first_week(self):
        """Test that no offset keeps days 0 to 6."""
        events = [_event("a", 0, 0), _event("b", 6, 6), _event("c", 7, 7)]
        assert [e.title for e in clip_to_window(events, 0)] == ["a", "b"]

    def test_shifts_day_indices(self):
        """Test that day indices move down by the offset."""
        events = [_event("a", 2, 2), _event("b", 4, 5, 22, 1)]
        clipped = clip_to_window(events, 2)
        assert [(e.start_day_index, e.end_day_index) for e in clipped] == [(0, 0), (2, 3)]

    def test_drops_events_before_window(self):
        """Test that events over before the window are dropped."""
        events = [_event("old", 0, 0), _event("today", 3, 3)]
        assert [e.title for e in clip_to_window(events, 3)] == ["today"]

    def test_keeps_event_ending_inside_window(self):
        """Test that an overnight event ending on day 0 is kept."""
        # Starts the night before the window opens
        events = [_event("overnight", 2, 3, 23, 1)]
        (event,) = clip_to_window(events, 3)
        assert (event.start_day_index, event.end_day_index) == (-1, 0)

    def test_keeps_event_starting_on_last_visible_day(self):
        """Test that an event starting on day 6 is kept."""
        events = [_event("late", 9, 10, 23, 2)]
        (event,) = clip_to_window(events, 3)
        assert (event.start_day_index, event.end_day_index) == (6, 7)

    def test_drops_event_starting_after_window(self):
        """Test that events after the window are dropped."""
        assert clip_to_window([_event("later", 10, 10)], 3) == []

    def test_keeps_event_spanning_whole_window(self):
        """Test that an event covering the whole window is kept."""
        events = [_event("epic", 1, 12)]
        (event,) = clip_to_window(events, 3)
        assert (event.start_day_index, event.end_day_index) == (-2, 9)

    def test_preserves_times_and_titles(self):
        """Test that only day indices change."""
        source = ScheduledEvent(
            title="Bar",
            group_title="Foo",
            start_day_index=4,
            start_hour=13,
            start_minute=7,
            end_day_index=4,
            end_hour=14,
            end_minute=2,
        )
        (event,) = clip_to_window([source], 4)
        assert event.composed_title == "Foo: Bar"
        assert (event.start_hour, event.start_minute, event.end_hour, event.end_minute) == (
            13,
            7,
            14,
            2,
        )

    def test_does_not_modify_input(self):
        """Test that the packed events are left alone."""
        events = [_event("a", 3, 3)]
        clip_to_window(events, 3)
        assert events[0].start_day_index == 3

    def test_custom_window_length(self):
        """Test a window shorter than a week."""
        events = [_event(str(n), n, n) for n in range(5)]
        assert [e.title for e in clip_to_window(events, 1, days=2)] == ["1", "2"]


class TestClipToCurrentWeek:
    """Tests for clipping relative to a calendar date."""
    def test_sunday_is_offset_zero(self):
        """Test that on Sunday the window starts at the anchor."""
        events = [_event("a", 0, 0), _event("b", 7, 7)]
        assert [e.title for e in clip_to_current_week(events, date(2026, 10, 18))] == ["a"]

    def test_today_becomes_day_zero(self):
        """Test that a Thursday becomes day 0."""
        events = [_event(str(n), n, n) for n in range(14)]
        # Thursday, four days after the anchor Sunday
        clipped = clip_to_current_week(events, datetime(2026, 10, 22, 12, 0))
        assert [e.title for e in clipped] == [str(n) for n in range(4, 11)]
        assert clipped[0].start_day_index == 0
