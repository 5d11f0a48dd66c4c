"""Unit tests for the now playing lookup."""

from __future__ import annotations

from weeklytv.api.models import CatalogItem, ScheduledEvent
from weeklytv.scheduling import now_playing, pack_events


def _event(
    title: str,
    start: tuple[int, int],
    end: tuple[int, int],
    *,
    start_day: int = 0,
    end_day: int = 0,
) -> ScheduledEvent:
    return ScheduledEvent(
        title=title,
        start_day_index=start_day,
        start_hour=start[0],
        start_minute=start[1],
        end_day_index=end_day,
        end_hour=end[0],
        end_minute=end[1],
    )


SCHEDULE = pack_events(
    [
        CatalogItem(title="Burning", duration_seconds=148 * 60),
        CatalogItem(title="Last Exit to Brooklyn", duration_seconds=102 * 60),
        CatalogItem(title="Microbe and Gasoline", duration_seconds=103 * 60),
        CatalogItem(title="Mystery Train", duration_seconds=30 * 60 * 60),
        CatalogItem(title="Pin", duration_seconds=103 * 60),
    ]
)


class TestNowPlaying:
    """Tests for the now playing lookup."""
    def test_start_hour_match(self):
        """Test a match in the event's start hour."""
        # Last Exit runs 02:28-04:10
        assert now_playing(SCHEDULE, 2, 30).title == "Last Exit to Brooklyn"

    def test_before_start_minute_in_start_hour_falls_to_previous(self):
        """Test that minutes before the start belong to the previous event."""
        assert now_playing(SCHEDULE, 2, 10).title == "Burning"

    def test_end_hour_match(self):
        """Test a match in the event's end hour."""
        assert now_playing(SCHEDULE, 4, 5).title == "Last Exit to Brooklyn"

    def test_boundary_minute_goes_to_earlier_event(self):
        """Test that a shared boundary minute goes to the earlier event."""
        assert now_playing(SCHEDULE, 4, 10).title == "Last Exit to Brooklyn"

    def test_hour_strictly_inside_event(self):
        """Test hours strictly between start and end."""
        assert now_playing(SCHEDULE, 0, 0).title == "Burning"
        assert now_playing(SCHEDULE, 1, 45).title == "Burning"

    def test_cross_midnight_event_not_matched_after_start_hour(self):
        """Test the lookup on an event that runs past midnight."""
        # Mystery Train: day 0 05:53 -> day 1 11:53. Its end hour is not
        # later than the query hour, so the lookup finds nothing.
        assert now_playing(SCHEDULE, 23, 0) is None

    def test_same_hour_event(self):
        """Test an event starting and ending within one hour."""
        events = [_event("Short", (9, 10), (9, 40))]
        assert now_playing(events, 9, 10).title == "Short"
        assert now_playing(events, 9, 40).title == "Short"
        assert now_playing(events, 9, 41) is None
        assert now_playing(events, 9, 5) is None

    def test_first_match_wins(self):
        """Test that the first matching event in order is returned."""
        events = [_event("One", (1, 0), (3, 0)), _event("Two", (3, 0), (5, 0))]
        assert now_playing(events, 4, 0).title == "Two"
        assert now_playing(events, 2, 0).title == "One"

    def test_only_day_zero_starts_considered(self):
        """Test that events starting on other days are ignored."""
        events = [
            _event("Yesterday", (20, 0), (8, 0), start_day=-1, end_day=0),
            _event("Tomorrow", (8, 0), (10, 0), start_day=1, end_day=1),
        ]
        assert now_playing(events, 7, 0) is None

    def test_empty(self):
        """Test an empty timetable."""
        assert now_playing([], 12, 0) is None
