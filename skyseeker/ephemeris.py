"""Low-precision solar, lunar and ecliptic-to-horizon computations."""

from __future__ import annotations

import math

from skyseeker.observer import Observer, Position
from skyseeker.timescale import Time

_J2000 = 2451545.0
_DAYS_PER_CENTURY = 36525.0
_ARCSEC = math.pi / (180.0 * 3600.0)


def _centuries(jd: float) -> float:
    return (jd - _J2000) / _DAYS_PER_CENTURY


def _nutation(jd: float) -> tuple[float, float]:
    """Nutation in longitude and in obliquity, in radians."""
    t = _centuries(jd)
    node = math.radians(125.04452 - 1934.136261 * t)
    sun = math.radians(280.4665 + 36000.7698 * t)
    moon = math.radians(218.3165 + 481267.8813 * t)
    dpsi = (
        -17.20 * math.sin(node)
        - 1.32 * math.sin(2 * sun)
        - 0.23 * math.sin(2 * moon)
        + 0.21 * math.sin(2 * node)
    )
    deps = (
        9.20 * math.cos(node)
        + 0.57 * math.cos(2 * sun)
        + 0.10 * math.cos(2 * moon)
        - 0.09 * math.cos(2 * node)
    )
    return dpsi * _ARCSEC, deps * _ARCSEC


def _mean_obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic (IAU), in radians."""
    t = _centuries(jd)
    seconds = 84381.448 - 46.8150 * t - 0.00059 * t * t + 0.001813 * t**3
    return seconds * _ARCSEC


def _mean_sidereal(jd: float) -> float:
    """Mean sidereal time at Greenwich, in radians."""
    t = _centuries(jd)
    degrees = (
        280.46061837
        + 360.98564736629 * (jd - _J2000)
        + 0.000387933 * t * t
        - t**3 / 38710000.0
    )
    return math.radians(degrees % 360.0)


def _apparent_sidereal(jd: float) -> float:
    dpsi, deps = _nutation(jd)
    obliquity = _mean_obliquity(jd) + deps
    return _mean_sidereal(jd) + dpsi * math.cos(obliquity)


def _horizontal(hour_angle: float, declination: float, latitude: float) -> tuple[float, float]:
    """Compass azimuth and altitude in degrees from hour angle and declination."""
    azimuth = math.atan2(
        math.sin(hour_angle) * math.cos(declination),
        math.cos(hour_angle) * math.sin(latitude) * math.cos(declination)
        - math.sin(declination) * math.cos(latitude),
    )
    sin_alt = math.sin(latitude) * math.sin(declination) + math.cos(latitude) * math.cos(
        declination
    ) * math.cos(hour_angle)
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))
    return (math.degrees(azimuth) + 180.0) % 360.0, math.degrees(altitude)


def position_from_ecliptic(
    longitude: float, latitude: float, observer: Observer, time: Time
) -> Position:
    """Horizontal position of a point given in ecliptic coordinates (radians)."""
    jd = time.julian_day()
    dpsi, deps = _nutation(jd)
    obliquity = _mean_obliquity(jd) + deps

    right_ascension = math.atan2(
        math.sin(longitude) * math.cos(obliquity) - math.tan(latitude) * math.sin(obliquity),
        math.cos(longitude),
    )
    sin_dec = math.sin(latitude) * math.cos(obliquity) + math.cos(latitude) * math.sin(
        obliquity
    ) * math.sin(longitude)
    declination = math.asin(max(-1.0, min(1.0, sin_dec)))

    sidereal = _mean_sidereal(jd) + dpsi * math.cos(obliquity)
    hour_angle = sidereal + observer.longitude - right_ascension
    azimuth, altitude = _horizontal(hour_angle, declination, observer.latitude)
    return Position(azimuth=azimuth, altitude=altitude)


def _sun_ecliptic(jd: float) -> tuple[float, float]:
    """Geometric ecliptic longitude and latitude of the Sun, in radians."""
    t = _centuries(jd)
    mean_longitude = 280.46646 + 36000.76983 * t + 0.0003032 * t * t
    anomaly = math.radians(357.52911 + 35999.05029 * t - 0.0001537 * t * t)
    centre = (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(anomaly)
        + (0.019993 - 0.000101 * t) * math.sin(2 * anomaly)
        + 0.000289 * math.sin(3 * anomaly)
    )
    return math.radians((mean_longitude + centre) % 360.0), 0.0


# (D, M, M', F, coefficient in 1e-6 degrees)
_MOON_LONGITUDE = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
)

_MOON_LATITUDE = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
)


def _moon_ecliptic(jd: float) -> tuple[float, float]:
    """Geocentric ecliptic longitude and latitude of the Moon, in radians."""
    t = _centuries(jd)
    mean_longitude = math.radians((218.3164477 + 481267.88123421 * t) % 360.0)
    elongation = math.radians((297.8501921 + 445267.1114034 * t) % 360.0)
    sun_anomaly = math.radians((357.5291092 + 35999.0502909 * t) % 360.0)
    moon_anomaly = math.radians((134.9633964 + 477198.8675055 * t) % 360.0)
    node_distance = math.radians((93.2720950 + 483202.0175233 * t) % 360.0)
    a1 = math.radians(119.75 + 131.849 * t)
    a2 = math.radians(53.09 + 479264.29 * t)
    a3 = math.radians(313.45 + 481266.484 * t)
    eccentricity = 1.0 - 0.002516 * t - 0.0000074 * t * t

    def series(terms, trig):
        total = 0.0
        for d, m, mp, f, coefficient in terms:
            argument = d * elongation + m * sun_anomaly + mp * moon_anomaly + f * node_distance
            total += coefficient * eccentricity ** abs(m) * trig(argument)
        return total

    sum_l = series(_MOON_LONGITUDE, math.sin)
    sum_l += (
        3958 * math.sin(a1)
        + 1962 * math.sin(mean_longitude - node_distance)
        + 318 * math.sin(a2)
    )
    sum_b = series(_MOON_LATITUDE, math.sin)
    sum_b += (
        -2235 * math.sin(mean_longitude)
        + 382 * math.sin(a3)
        + 175 * math.sin(a1 - node_distance)
        + 175 * math.sin(a1 + node_distance)
        + 127 * math.sin(mean_longitude - moon_anomaly)
        - 115 * math.sin(mean_longitude + moon_anomaly)
    )
    longitude = (math.degrees(mean_longitude) + sum_l / 1e6) % 360.0
    return math.radians(longitude), math.radians(sum_b / 1e6)


def sun_position(observer: Observer, time: Time) -> Position:
    """Horizontal position of the Sun."""
    longitude, latitude = _sun_ecliptic(time.julian_day())
    return position_from_ecliptic(longitude, latitude, observer, time)


def moon_position(observer: Observer, time: Time) -> Position:
    """Horizontal position of the Moon."""
    longitude, latitude = _moon_ecliptic(time.julian_day())
    return position_from_ecliptic(longitude, latitude, observer, time)