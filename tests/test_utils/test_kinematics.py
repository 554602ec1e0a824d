"""
Tests for bearing, distance and speed between points.
"""

from datetime import datetime, timedelta

import pytest

from gpx_kit.utils.gpx_types import UTC
from gpx_kit.utils.kinematics import EARTH_RADIUS_M, bearing, distance, speed

T0 = datetime(2002, 3, 11, 20, 28, 26, tzinfo=UTC)


class TestBearing:
    """Test initial bearing between two points."""

    def test_cardinal_directions(self):
        assert bearing(0, 0, 1, 0) == pytest.approx(0.0)
        assert bearing(0, 0, 0, 1) == pytest.approx(90.0)
        assert bearing(1, 0, 0, 0) == pytest.approx(180.0)
        assert bearing(0, 1, 0, 0) == pytest.approx(270.0)

    def test_range(self):
        value = bearing(42.405488, -71.098173, 42.405495, -71.098364)
        assert 0 <= value < 360


class TestDistance:
    """Test great circle distance."""

    def test_one_degree_of_latitude(self):
        assert distance(0, 0, 1, 0) == pytest.approx(EARTH_RADIUS_M * 3.141592653589793 / 180)

    def test_same_point(self):
        assert distance(42.4, -71.1, 42.4, -71.1) == 0.0


class TestSpeed:
    """Test speed between timed points."""

    def test_speed(self):
        expected = distance(0, 0, 0, 0.001) / 10
        assert speed(0, 0, T0, 0, 0.001, T0 + timedelta(seconds=10)) == pytest.approx(expected)

    def test_missing_time(self):
        assert speed(0, 0, None, 0, 0.001, T0) == 0.0
        assert speed(0, 0, T0, 0, 0.001, None) == 0.0

    def test_same_time(self):
        assert speed(0, 0, T0, 0, 0.001, T0) == 0.0
