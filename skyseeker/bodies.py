"""Celestial bodies: stars, planets, the Moon and the Sun."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from skyseeker.ephemeris import (
    _centuries,
    _horizontal,
    _apparent_sidereal,
    _mean_obliquity,
    _nutation,
    moon_position,
    position_from_ecliptic,
    sun_position,
)
from skyseeker.observer import EarthOrientation, Observer, Position
from skyseeker.timescale import Time

_ARCSEC = math.pi / (180.0 * 3600.0)
_LIGHT_DAYS_PER_AU = 0.0057755183


class Planet(enum.Enum):
    """The major planets other than Earth."""

    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"

    @property
    def id(self) -> str:
        return self.value

    def position(self, observer: Observer, time: Time) -> Position:
        """Horizontal position of the planet."""
        longitude, latitude = _planet_ecliptic(self, time.julian_day())
        return position_from_ecliptic(longitude, latitude, observer, time)


# a, e, I, L, long. perihelion, long. node and their rates per century
_ELEMENTS = {
    Planet.MERCURY: (
        (0.38709927, 0.20563593, 7.00497902, 252.25032350, 77.45779628, 48.33076593),
        (0.00000037, 0.00001906, -0.00594749, 149472.67411175, 0.16047689, -0.12534081),
    ),
    Planet.VENUS: (
        (0.72333566, 0.00677672, 3.39467605, 181.97909950, 131.60246718, 76.67984255),
        (0.00000390, -0.00004107, -0.00078890, 58517.81538729, 0.00268329, -0.27769418),
    ),
    Planet.MARS: (
        (1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891),
        (0.00001847, 0.00007882, -0.00813131, 19140.30268499, 0.44441088, -0.29257343),
    ),
    Planet.JUPITER: (
        (5.20288700, 0.04838624, 1.30439695, 34.39644051, 14.72847983, 100.47390909),
        (-0.00011607, -0.00013253, -0.00183714, 3034.74612775, 0.21252668, 0.20469106),
    ),
    Planet.SATURN: (
        (9.53667594, 0.05386179, 2.48599187, 49.95424423, 92.59887831, 113.66242448),
        (-0.00125060, -0.00050991, 0.00193609, 1222.49362201, -0.41897216, -0.28867794),
    ),
    Planet.URANUS: (
        (19.18916464, 0.04725744, 0.77263783, 313.23810451, 170.95427630, 74.01692503),
        (-0.00196176, -0.00004397, -0.00242939, 428.48202785, 0.40805281, 0.04240589),
    ),
    Planet.NEPTUNE: (
        (30.06992276, 0.00859048, 1.77004347, -55.12002969, 44.96476227, 131.78422574),
        (0.00026291, 0.00005105, 0.00035372, 218.45945325, -0.32241464, -0.00508664),
    ),
}

_EARTH = (
    (1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0),
    (0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0),
)


def _heliocentric(elements, t: float) -> tuple[float, float, float]:
    base, rates = elements
    a, e, incl, mean_long, perihelion, node = (b + r * t for b, r in zip(base, rates))
    anomaly = math.radians((mean_long - perihelion + 180.0) % 360.0 - 180.0)
    argument = math.radians(perihelion - node)
    node = math.radians(node)
    incl = math.radians(incl)

    eccentric = anomaly + e * math.sin(anomaly)
    for _ in range(30):
        step = (eccentric - e * math.sin(eccentric) - anomaly) / (1.0 - e * math.cos(eccentric))
        eccentric -= step
        if abs(step) < 1e-12:
            break

    xp = a * (math.cos(eccentric) - e)
    yp = a * math.sqrt(1.0 - e * e) * math.sin(eccentric)
    cw, sw = math.cos(argument), math.sin(argument)
    cn, sn = math.cos(node), math.sin(node)
    ci, si = math.cos(incl), math.sin(incl)
    x = (cw * cn - sw * sn * ci) * xp + (-sw * cn - cw * sn * ci) * yp
    y = (cw * sn + sw * cn * ci) * xp + (-sw * sn + cw * cn * ci) * yp
    z = (sw * si) * xp + (cw * si) * yp
    return x, y, z


def _planet_ecliptic(planet: Planet, jd: float) -> tuple[float, float]:
    """Apparent geocentric ecliptic longitude and latitude, in radians."""
    earth = _heliocentric(_EARTH, _centuries(jd))
    delay = 0.0
    for _ in range(2):
        body = _heliocentric(_ELEMENTS[planet], _centuries(jd - delay))
        dx, dy, dz = (b - e for b, e in zip(body, earth))
        delay = _LIGHT_DAYS_PER_AU * math.sqrt(dx * dx + dy * dy + dz * dz)
    longitude = math.atan2(dy, dx)
    latitude = math.atan2(dz, math.hypot(dx, dy))
    precession = 5029.0966 * _centuries(jd) * _ARCSEC
    dpsi, _ = _nutation(jd)
    return (longitude + precession + dpsi) % (2 * math.pi), latitude


def _precess(ra: float, dec: float, t: float) -> tuple[float, float]:
    """Precess J2000 equatorial coordinates by t Julian centuries (IAU 1976)."""
    zeta = (2306.2181 * t + 0.30188 * t * t + 0.017998 * t**3) * _ARCSEC
    z = (2306.2181 * t + 1.09468 * t * t + 0.018203 * t**3) * _ARCSEC
    theta = (2004.3109 * t - 0.42665 * t * t - 0.041833 * t**3) * _ARCSEC
    a = math.cos(dec) * math.sin(ra + zeta)
    b = math.cos(theta) * math.cos(dec) * math.cos(ra + zeta) - math.sin(theta) * math.sin(dec)
    c = math.sin(theta) * math.cos(dec) * math.cos(ra + zeta) + math.cos(theta) * math.sin(dec)
    return math.atan2(a, b) + z, math.asin(max(-1.0, min(1.0, c)))


def _refraction(altitude: float, observer: Observer) -> float:
    """Atmospheric refraction in degrees for an apparent altitude in degrees."""
    if observer.pressure <= 0.0 or altitude < -1.0:
        return 0.0
    arc_minutes = 1.02 / math.tan(math.radians(altitude + 10.3 / (altitude + 5.11)))
    scale = (observer.pressure / 1010.0) * (283.0 / (273.0 + observer.temperature))
    return max(0.0, arc_minutes * scale / 60.0)


@dataclass(frozen=True)
class Star:
    """A catalogued star with J2000 astrometry.

    Right ascension and declination are in radians, proper motions in
    radians per year, parallax in arcseconds, radial velocity in km/s.
    """

    id: str
    right_ascension: float
    declination: float
    proper_motion_right_ascension: float
    proper_motion_declination: float
    parallax: float
    radial_velocity: float
    visual_magnitude: float
    hr: int | None = None
    name: str | None = None
    common_name: str | None = None
    bayer: str | None = None
    bayer_full: str | None = None
    constellation: str | None = None
    notes: tuple[tuple[str, str], ...] = ()
    b_v_color: float | None = None

    def position(
        self, observer: Observer, time: Time, earth_orientation: EarthOrientation
    ) -> Position:
        """Observed horizontal position, including refraction."""
        utc1, utc2 = time.double_julian()
        jd = utc1 + utc2
        t = _centuries(jd)
        years = t * 100.0

        ra = self.right_ascension + self.proper_motion_right_ascension * years
        dec = self.declination + self.proper_motion_declination * years
        ra, dec = _precess(ra, dec, t)

        dpsi, deps = _nutation(jd)
        obliquity = _mean_obliquity(jd) + deps
        tan_dec = math.tan(dec) if abs(math.cos(dec)) > 1e-12 else 0.0
        d_ra = (
            math.cos(obliquity) + math.sin(obliquity) * math.sin(ra) * tan_dec
        ) * dpsi - math.cos(ra) * tan_dec * deps
        d_dec = math.sin(obliquity) * math.cos(ra) * dpsi + math.sin(ra) * deps
        ra += d_ra
        dec += d_dec

        jd_ut1 = jd + earth_orientation.dut1 / 86400.0
        hour_angle = _apparent_sidereal(jd_ut1) + observer.longitude - ra
        azimuth, altitude = _horizontal(hour_angle, dec, observer.latitude)
        altitude += _refraction(altitude, observer)
        return Position(azimuth=azimuth, altitude=min(altitude, 90.0))


class BodyKind(enum.Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"
    SUN = "sun"


@dataclass(frozen=True)
class CelestialBody:
    """A star, a planet, the Moon or the Sun."""

    kind: BodyKind
    star: Star | None = None
    planet: Planet | None = None

    @classmethod
    def of_star(cls, star: Star) -> CelestialBody:
        return cls(BodyKind.STAR, star=star)

    @classmethod
    def of_planet(cls, planet: Planet) -> CelestialBody:
        return cls(BodyKind.PLANET, planet=planet)

    @classmethod
    def moon(cls) -> CelestialBody:
        return cls(BodyKind.MOON)

    @classmethod
    def sun(cls) -> CelestialBody:
        return cls(BodyKind.SUN)

    @classmethod
    def standard_bodies(cls) -> list[CelestialBody]:
        """The planets, the Moon and the Sun."""
        return [cls.of_planet(planet) for planet in Planet] + [cls.moon(), cls.sun()]

    @property
    def id(self) -> str:
        if self.kind is BodyKind.STAR:
            return self.star.id
        if self.kind is BodyKind.PLANET:
            return self.planet.id
        return "Moon" if self.kind is BodyKind.MOON else "Sun"

    def position(
        self, observer: Observer, time: Time, earth_orientation: EarthOrientation
    ) -> Position:
        if self.kind is BodyKind.STAR:
            return self.star.position(observer, time, earth_orientation)
        if self.kind is BodyKind.PLANET:
            return self.planet.position(observer, time)
        if self.kind is BodyKind.MOON:
            return moon_position(observer, time)
        return sun_position(observer, time)

    @property
    def visual_magnitude(self) -> float:
        if self.kind is BodyKind.STAR:
            return self.star.visual_magnitude
        if self.kind is BodyKind.MOON:
            return -3.0
        if self.kind is BodyKind.SUN:
            return -14.0
        return 0.0

    @property
    def constellation(self) -> str | None:
        return self.star.constellation if self.kind is BodyKind.STAR else None

    @property
    def is_star(self) -> bool:
        return self.kind is BodyKind.STAR

    @property
    def is_planet(self) -> bool:
        return self.kind is BodyKind.PLANET

    @property
    def is_moon(self) -> bool:
        return self.kind is BodyKind.MOON

    @property
    def is_sun(self) -> bool:
        return self.kind is BodyKind.SUN