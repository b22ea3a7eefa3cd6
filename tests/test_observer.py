import dataclasses

import pytest

from skyseeker.observer import EarthOrientation, Observer, Position


def test_observer_defaults():
    observer = Observer()
    assert observer.longitude == 0.0
    assert observer.latitude == 0.0
    assert observer.height == 0.0
    assert observer.pressure == 1013.25
    assert observer.temperature == 15.0
    assert observer.humidity == 0.5
    assert observer.wavelength == 0.55


def test_observer_none_takes_defaults():
    observer = Observer(
        longitude=0.25,
        latitude=0.9,
        height=None,
        pressure=None,
        temperature=None,
        humidity=None,
        wavelength=None,
    )
    assert (observer.longitude, observer.latitude) == (0.25, 0.9)
    assert observer.height == 0.0
    assert observer.pressure == 1013.25
    assert observer.temperature == 15.0
    assert observer.humidity == 0.5
    assert observer.wavelength == 0.55


def test_observer_keeps_given_values():
    observer = Observer(height=300.0, pressure=950.0, temperature=-5.0, humidity=0.1, wavelength=1.2)
    assert observer.height == 300.0
    assert observer.pressure == 950.0
    assert observer.temperature == -5.0
    assert observer.humidity == 0.1
    assert observer.wavelength == 1.2


def test_earth_orientation_defaults():
    orientation = EarthOrientation()
    assert orientation.polar_motion_x == 0.0
    assert orientation.polar_motion_y == 0.0
    assert orientation.dut1 == 0.0


def test_earth_orientation_components():
    orientation = EarthOrientation(polar_motion=(1e-6, 2e-6), dut1=-0.1)
    assert orientation.polar_motion_x == 1e-6
    assert orientation.polar_motion_y == 2e-6
    assert orientation.dut1 == -0.1


def test_position_is_immutable_value():
    position = Position(azimuth=90.0, altitude=45.0)
    assert position == Position(90.0, 45.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        position.azimuth = 10.0  # type: ignore[misc]