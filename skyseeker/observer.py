"""Observer, Earth orientation and sky position values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Horizontal position of an object in the sky.

    ``azimuth`` is the compass direction in degrees (0 = N, 90 = E,
    180 = S, 270 = W); ``altitude`` is the angle above the horizon in
    degrees (0 = horizon, 90 = overhead).
    """

    azimuth: float
    altitude: float


_OBSERVER_DEFAULTS = {
    "height": 0.0,
    "pressure": 1013.25,
    "temperature": 15.0,
    "humidity": 0.5,
    "wavelength": 0.55,
}


@dataclass
class Observer:
    """Location and atmospheric conditions of an observer.

    Longitude (east positive) and geodetic latitude are in radians, height
    above the WGS84 ellipsoid in metres, pressure in hPa, temperature in
    degrees Celsius, humidity as a fraction from 0 to 1 and wavelength in
    micrometres. Atmospheric values given as ``None`` take their defaults.
    """

    longitude: float = 0.0
    latitude: float = 0.0
    height: float | None = 0.0
    pressure: float | None = 1013.25
    temperature: float | None = 15.0
    humidity: float | None = 0.5
    wavelength: float | None = 0.55

    def __post_init__(self) -> None:
        for name, default in _OBSERVER_DEFAULTS.items():
            if getattr(self, name) is None:
                setattr(self, name, default)


@dataclass(frozen=True)
class EarthOrientation:
    """Earth orientation parameters.

    ``polar_motion`` holds the x and y pole coordinates in radians and
    ``dut1`` is UT1 - UTC in seconds.
    """

    polar_motion: tuple[float, float] = (0.0, 0.0)
    dut1: float = 0.0

    @property
    def polar_motion_x(self) -> float:
        return self.polar_motion[0]

    @property
    def polar_motion_y(self) -> float:
        return self.polar_motion[1]