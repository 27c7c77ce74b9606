"""
Unit tests for ClockState.
"""

import pytest
from src.chaldean_clock.config import ClockConfig
from src.chaldean_clock.systems.clock import ClockState


class TestAdvanceHour:
    """Tests for hour advancement and rollover."""

    def test_initial_state(self, clock):
        assert clock.current_hour() == 1
        assert clock.current_day() == 1
        assert clock.tick_accumulator == 0
        assert clock.paused is False

    def test_full_day_rolls_over(self, clock):
        """Advancing hours_per_day times returns to hour 1 of the next day."""
        for _ in range(24):
            clock.advance_hour()
        assert clock.current_hour() == 1
        assert clock.current_day() == 2

    def test_advance_many_at_once(self, clock):
        clock.advance_hour(30)
        assert clock.current_hour() == 7
        assert clock.current_day() == 2

    def test_custom_day_length(self):
        clock = ClockState(ClockConfig(hours_per_day=10))
        clock.advance_hour(10)
        assert (clock.current_day(), clock.current_hour()) == (2, 1)

    def test_ruler_ignores_custom_day_length(self):
        """Rulers are laid over a 24-hour reference day."""
        clock = ClockState(ClockConfig(hours_per_day=10))
        clock.advance_hour(10)
        assert clock.ruler_label() == "Sun"

    def test_zero_times_is_noop(self, clock):
        clock.advance_hour(0)
        assert clock.current_hour() == 1


class TestTick:
    """Tests for frame ticks."""

    def test_ticks_below_threshold_do_not_advance(self, clock):
        for _ in range(clock.ticks_per_hour - 1):
            clock.tick()
        assert clock.current_hour() == 1
        assert clock.tick_accumulator == clock.ticks_per_hour - 1

    def test_threshold_tick_advances_one_hour(self, clock):
        for _ in range(clock.ticks_per_hour):
            clock.tick()
        assert clock.current_hour() == 2
        assert clock.tick_accumulator == 0

    def test_ticks_per_hour_from_config(self):
        clock = ClockState(ClockConfig(seconds_per_hour=60))
        assert clock.ticks_per_hour == 3600


class TestPause:
    """Tests for pause and resume."""

    def test_paused_clock_does_not_move(self, clock):
        clock.tick()
        clock.pause()
        for _ in range(500):
            clock.tick()
        clock.advance_hour(5)
        assert clock.current_hour() == 1
        assert clock.current_day() == 1
        assert clock.tick_accumulator == 1

    def test_resume_keeps_accumulator(self, clock):
        for _ in range(30):
            clock.tick()
        clock.pause()
        clock.resume()
        assert clock.tick_accumulator == 30
        for _ in range(30):
            clock.tick()
        assert clock.current_hour() == 2


class TestDispatch:
    """Tests for ruler-triggered dispatch."""

    def test_mars_fires_on_each_rollover_into_mars(self, clock, dispatched):
        clock.register_handler("Mars", 7)
        clock.advance_hour()
        assert dispatched == []
        clock.advance_hour()
        assert clock.ruler_label() == "Mars"
        assert dispatched == [7]

    def test_burst_revisits_fire_repeatedly(self, clock, dispatched):
        """Mars rules hours 3, 10, 17 and 24 of day 1."""
        clock.register_handler("Mars", 7)
        clock.advance_hour(23)
        assert dispatched == [7, 7, 7, 7]

    def test_tick_dispatches_once_per_hour(self, clock, dispatched):
        clock.register_handler("Jupiter", 2)
        for _ in range(clock.ticks_per_hour * 2 - 1):
            clock.tick()
        assert dispatched == [2]

    def test_setters_do_not_dispatch(self, clock, dispatched):
        clock.register_handler("Venus", 5)
        clock.set_hour(5)
        assert clock.ruler_label() == "Venus"
        assert dispatched == []

    def test_reentrant_advance_is_refused(self, fast_config):
        calls = []
        clock = ClockState(fast_config)

        def dispatcher(event_id):
            calls.append(event_id)
            clock.advance_hour()
            clock.tick()

        clock.dispatcher = dispatcher
        clock.register_handler("Jupiter", 1)
        clock.advance_hour()
        assert calls == [1]
        assert clock.current_hour() == 2
        assert clock.tick_accumulator == 0
        assert clock.advancing is False

    def test_pause_during_burst_stops_it(self, fast_config):
        clock = ClockState(fast_config)
        clock.dispatcher = lambda event_id: clock.pause()
        clock.register_handler("Jupiter", 1)
        clock.advance_hour(5)
        assert clock.current_hour() == 2
        assert clock.paused is True

    def test_dispatcher_error_does_not_stop_clock(self, fast_config):
        def dispatcher(event_id):
            raise RuntimeError("host failure")

        clock = ClockState(fast_config, dispatcher=dispatcher)
        clock.register_handler("Jupiter", 1)
        clock.advance_hour(3)
        assert clock.current_hour() == 4
        assert clock.advancing is False


class TestSetters:
    """Tests for scripted setters."""

    @pytest.mark.parametrize("value,expected", [(7, 7), ("7", 7), (0, 1), (-4, 1), (30, 24)])
    def test_set_hour_clamps(self, clock, value, expected):
        clock.set_hour(value)
        assert clock.current_hour() == expected

    def test_set_hour_ignores_non_numeric(self, clock):
        clock.set_hour(6)
        clock.set_hour("dusk")
        clock.set_hour(None)
        assert clock.current_hour() == 6

    def test_set_day(self, clock):
        clock.set_day(12)
        assert clock.current_day() == 12
        clock.set_day(-3)
        assert clock.current_day() == 1

    def test_setters_leave_accumulator(self, clock):
        for _ in range(10):
            clock.tick()
        clock.set_hour(20)
        assert clock.tick_accumulator == 10


class TestPeriods:
    """Tests for day/night halves."""

    @pytest.mark.parametrize("hour,is_day", [(1, True), (12, True), (13, False), (24, False)])
    def test_default_split(self, clock, hour, is_day):
        clock.set_hour(hour)
        assert clock.is_day_period() is is_day
        assert clock.is_night_period() is (not is_day)

    def test_split_follows_configured_day_length(self):
        clock = ClockState(ClockConfig(hours_per_day=10))
        clock.set_hour(5)
        assert clock.is_day_period()
        clock.set_hour(6)
        assert clock.is_night_period()


class TestPersistence:
    """Tests for to_dict/load_dict."""

    def test_round_trip_fields(self, clock):
        clock.advance_hour(3)
        clock.tick()
        clock.pause()
        data = clock.to_dict()
        assert data == {"hour": 4, "day": 1, "paused": True, "tick_accumulator": 1}

    def test_load_clamps_bad_values(self, clock):
        clock.load_dict({"hour": 99, "day": 0, "paused": True, "tick_accumulator": 500})
        assert clock.current_hour() == 24
        assert clock.current_day() == 1
        assert clock.paused is True
        assert clock.tick_accumulator == clock.ticks_per_hour - 1

    def test_ruler_meaning(self, clock):
        assert clock.ruler_meaning() == "Discipline, structure, responsibility"
