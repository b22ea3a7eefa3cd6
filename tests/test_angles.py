import math

import pytest

from skyseeker.angles import (
    DAS2R,
    DS2R,
    angle_format_to_radians,
    arc_seconds_to_radians,
    time_format_to_radians,
)
from skyseeker.errors import AngleFormatError, TimeFormatError


def test_full_circle_of_arc_seconds():
    assert arc_seconds_to_radians(360 * 3600) == pytest.approx(2 * math.pi)


def test_arc_seconds_scale_linearly():
    assert arc_seconds_to_radians(7.5) == pytest.approx(7.5 * DAS2R)
    assert arc_seconds_to_radians(0.0) == 0.0


def test_half_circle_in_degrees():
    assert angle_format_to_radians("+", 180, 0, 0.0) == pytest.approx(math.pi)


def test_twelve_hours_is_half_circle():
    assert time_format_to_radians(" ", 12, 0, 0.0) == pytest.approx(math.pi)


def test_angle_matches_degree_conversion():
    value = angle_format_to_radians("+", 51, 30, 15.0)
    assert value == pytest.approx(math.radians(51 + 30 / 60 + 15 / 3600))


def test_time_matches_hour_conversion():
    value = time_format_to_radians("+", 14, 15, 39.7)
    assert value == pytest.approx((14 + 15 / 60 + 39.7 / 3600) * 3600 * DS2R)
    assert value == pytest.approx(math.radians((14 + 15 / 60 + 39.7 / 3600) * 15))


@pytest.mark.parametrize("func", [angle_format_to_radians, time_format_to_radians])
def test_minus_sign_negates(func):
    positive = func("+", 10, 20, 30.5)
    assert func("-", 10, 20, 30.5) == -positive
    assert func(" ", 10, 20, 30.5) == positive


@pytest.mark.parametrize(
    "degrees, minutes, seconds, part",
    [
        (360, 0, 0.0, "hours"),
        (-1, 0, 0.0, "hours"),
        (10, 60, 0.0, "minutes"),
        (10, 0, 60.0, "seconds"),
        (10, 0, -0.5, "seconds"),
    ],
)
def test_angle_format_errors(degrees, minutes, seconds, part):
    with pytest.raises(AngleFormatError) as info:
        angle_format_to_radians("+", degrees, minutes, seconds)
    assert info.value.part == part


@pytest.mark.parametrize(
    "hours, minutes, seconds, part",
    [
        (24, 0, 0.0, "hours"),
        (5, 60, 0.0, "minutes"),
        (5, 0, 60.0, "seconds"),
    ],
)
def test_time_format_errors(hours, minutes, seconds, part):
    with pytest.raises(TimeFormatError) as info:
        time_format_to_radians(" ", hours, minutes, seconds)
    assert info.value.part == part


def test_limits_are_accepted():
    assert angle_format_to_radians("+", 359, 59, 59.999) < 2 * math.pi
    assert time_format_to_radians("+", 23, 59, 59.999) < 2 * math.pi