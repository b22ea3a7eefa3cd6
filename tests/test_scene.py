import math

import pytest

from skyseeker.bodies import CelestialBody, Planet, Star
from skyseeker.observer import Position
from skyseeker.scene import (
    MAX_LUMINANCE,
    MIN_LUMINANCE,
    REFERENCE_LUMINANCE,
    BatchedPositionUpdate,
    DragLookCamera,
    body_scale,
    magnitude_to_luminance,
    sky_position_to_vector,
)


def _star_body():
    return CelestialBody.of_star(
        Star(
            id="HR 9",
            right_ascension=0.0,
            declination=0.0,
            proper_motion_right_ascension=0.0,
            proper_motion_declination=0.0,
            parallax=0.001,
            radial_velocity=0.0,
            visual_magnitude=3.0,
        )
    )


def test_luminance_at_reference_magnitude():
    assert magnitude_to_luminance(0.0) == pytest.approx(REFERENCE_LUMINANCE)


def test_luminance_clamped():
    assert magnitude_to_luminance(-30.0) == MAX_LUMINANCE
    assert magnitude_to_luminance(30.0) == MIN_LUMINANCE


def test_luminance_decreases_with_magnitude():
    values = [magnitude_to_luminance(m) for m in (-2.0, 0.0, 2.0, 4.0, 6.0)]
    assert values == sorted(values, reverse=True)


def test_body_scale():
    assert body_scale(CelestialBody.sun()) == 50.0
    assert body_scale(CelestialBody.of_planet(Planet.VENUS)) == 4.0
    assert body_scale(CelestialBody.moon()) == 20.0
    assert body_scale(_star_body()) == 2.0


def test_vector_overhead():
    x, y, z = sky_position_to_vector(Position(azimuth=123.0, altitude=90.0), 3500.0)
    assert (x, y, z) == pytest.approx((0.0, 3500.0, 0.0), abs=1e-9)


def test_vector_north_and_east():
    assert sky_position_to_vector(Position(0.0, 0.0), 10.0) == pytest.approx((0.0, 0.0, 10.0))
    assert sky_position_to_vector(Position(90.0, 0.0), 10.0) == pytest.approx(
        (-10.0, 0.0, 0.0), abs=1e-9
    )


@pytest.mark.parametrize("azimuth,altitude", [(10.0, 20.0), (200.0, -30.0), (359.0, 80.0)])
def test_vector_length_is_radius(azimuth, altitude):
    vector = sky_position_to_vector(Position(azimuth, altitude), 42.0)
    assert math.hypot(*vector) == pytest.approx(42.0)


def test_camera_stays_still_without_drag():
    camera = DragLookCamera()
    assert camera.update(0.0, 0.0, 1 / 60) == (0.0, 0.0)


def test_camera_eases_halfway_per_frame():
    camera = DragLookCamera()
    yaw, _ = camera.update(100.0, 0.0, 1 / 60)
    target_yaw = -100.0 * camera.sensitivity
    assert camera.target[0] == pytest.approx(target_yaw)
    assert yaw == pytest.approx(target_yaw * camera.smoothness)


def test_camera_converges_and_clamps_pitch():
    camera = DragLookCamera()
    camera.update(0.0, 1_000_000.0, 1 / 60)
    for _ in range(200):
        camera.update(0.0, 0.0, 1 / 60)
    assert camera.pitch == pytest.approx(-math.radians(89.0))
    assert camera.target[1] == pytest.approx(-math.radians(89.0))


def test_batches_cycle():
    batches = BatchedPositionUpdate()
    ranges = [batches.next_range(120) for _ in range(4)]
    assert ranges == [range(0, 50), range(50, 100), range(100, 120), range(0, 50)]


def test_batches_empty_total_leaves_index():
    batches = BatchedPositionUpdate(current_index=7)
    assert list(batches.next_range(0)) == []
    assert batches.current_index == 7


def test_batches_reset_when_total_shrinks():
    batches = BatchedPositionUpdate(current_index=100, batch_size=10)
    assert batches.next_range(30) == range(0, 10)
    assert batches.current_index == 10