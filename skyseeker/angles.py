"""Conversions between sexagesimal notation and radians."""

from __future__ import annotations

from collections.abc import Callable

from skyseeker.errors import AngleFormatError, TimeFormatError

#: Arcseconds to radians.
DAS2R = 4.848136811095359935899141e-6
#: Seconds of time to radians.
DS2R = 7.272205216643039903848712e-5


def arc_seconds_to_radians(arc_seconds: float) -> float:
    """Convert an angle in arcseconds to radians."""
    return arc_seconds * DAS2R


def _sexagesimal_to_radians(
    sign: str,
    major: int,
    minor: int,
    seconds: float,
    major_limit: int,
    unit: float,
    error: Callable[[str], Exception],
) -> float:
    if not 0 <= major <= major_limit:
        raise error("hours")
    if not 0 <= minor <= 59:
        raise error("minutes")
    if not 0.0 <= seconds < 60.0:
        raise error("seconds")
    factor = -1.0 if sign == "-" else 1.0
    return factor * (60.0 * (60.0 * major + minor) + seconds) * unit


def angle_format_to_radians(
    sign: str, degrees: int, arc_minutes: int, arc_seconds: float
) -> float:
    """Convert degrees, arcminutes and arcseconds to radians.

    Only a sign of ``"-"`` makes the result negative. Degrees must lie in
    0..359, arcminutes in 0..59 and arcseconds in [0, 60).
    """
    return _sexagesimal_to_radians(
        sign, degrees, arc_minutes, arc_seconds, 359, DAS2R, AngleFormatError
    )


def time_format_to_radians(sign: str, hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes and seconds of time to radians.

    Only a sign of ``"-"`` makes the result negative. Hours must lie in
    0..23, minutes in 0..59 and seconds in [0, 60).
    """
    return _sexagesimal_to_radians(sign, hours, minutes, seconds, 23, DS2R, TimeFormatError)