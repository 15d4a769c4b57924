"""
Tests for the shared numeric and windowing helpers.
"""
import math
from datetime import datetime, timezone, timedelta

import pytest

from campus_wellness.engine.numeric import (
    as_utc,
    clamp,
    mean,
    most_recent,
    newest_first,
    prior_window,
    round_half_up,
)


class TestClamp:
    @pytest.mark.parametrize("value,expected", [
        (-5.0, 0.0),
        (0.0, 0.0),
        (42.5, 42.5),
        (100.0, 100.0),
        (160.0, 100.0),
        (math.inf, 100.0),
        (-math.inf, 0.0),
    ])
    def test_bounds(self, value, expected):
        assert clamp(value) == expected

    def test_nan_collapses_to_low(self):
        assert clamp(math.nan) == 0.0

    def test_custom_range(self):
        assert clamp(12, low=1, high=10) == 10


class TestMean:
    def test_empty_is_zero(self):
        assert mean([]) == 0.0

    def test_generator_input(self):
        assert mean(x for x in (1, 2, 3, 4)) == 2.5


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [
        (74.25, 74),
        (74.5, 75),
        (49.49, 49),
        (0.5, 1),
        (0.0, 0),
        (100.0, 100),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_bankers_rounding(self):
        # round() would give 72
        assert round_half_up(72.5) == 73

    def test_non_finite_is_zero(self):
        assert round_half_up(math.nan) == 0


class TestWindows:
    _DATA = [5, 4, 3, 2, 1]  # newest first

    def test_most_recent(self):
        assert most_recent(self._DATA, 3) == [5, 4, 3]

    def test_most_recent_short_input(self):
        assert most_recent(self._DATA, 10) == self._DATA

    def test_prior_window(self):
        assert prior_window(self._DATA, 2, offset=3) == [2, 1]

    def test_prior_window_past_end_is_empty(self):
        assert prior_window(self._DATA, 4, offset=7) == []

    def test_newest_first_does_not_mutate(self):
        data = [1, 3, 2]
        assert newest_first(data, key=lambda x: x) == [3, 2, 1]
        assert data == [1, 3, 2]


class TestAsUtc:
    def test_naive_becomes_utc(self):
        assert as_utc(datetime(2026, 3, 1, 12)).tzinfo == timezone.utc

    def test_utc_is_unchanged(self):
        dt = datetime(2026, 3, 1, 12, tzinfo=timezone.utc)
        assert as_utc(dt) == dt
        assert as_utc(dt).tzinfo == timezone.utc

    def test_offset_is_converted(self):
        dt = datetime(2026, 3, 1, 12, tzinfo=timezone(timedelta(hours=2)))
        converted = as_utc(dt)
        assert converted.tzinfo == timezone.utc
        assert converted.hour == 10
        assert converted == dt
