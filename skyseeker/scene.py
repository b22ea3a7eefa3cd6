"""Helpers for showing bodies in a 3D sky view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from skyseeker.bodies import CelestialBody
from skyseeker.observer import Position

REFERENCE_LUMINANCE = 500.0
REFERENCE_MAGNITUDE = 0.0
MIN_LUMINANCE = 0.0001
MAX_LUMINANCE = 100000.0
POGSON_RATIO = 2.512

_PITCH_LIMIT = math.radians(89.0)


def magnitude_to_luminance(magnitude: float) -> float:
    """Emissive luminance for a visual magnitude, clamped to a usable range."""
    luminance = REFERENCE_LUMINANCE * POGSON_RATIO ** (REFERENCE_MAGNITUDE - magnitude)
    return min(max(luminance, MIN_LUMINANCE), MAX_LUMINANCE)


def body_scale(body: CelestialBody) -> float:
    """Display size of a body."""
    if body.is_sun:
        return 50.0
    if body.is_planet:
        return 4.0
    if body.is_moon:
        return 20.0
    return 2.0


def sky_position_to_vector(position: Position, radius: float) -> tuple[float, float, float]:
    """Point on a sphere of the given radius; y is up."""
    azimuth = -math.radians(position.azimuth)
    altitude = math.radians(position.altitude)
    y = radius * math.sin(altitude)
    horizontal = radius * math.cos(altitude)
    return horizontal * math.sin(azimuth), y, horizontal * math.cos(azimuth)


@dataclass
class DragLookCamera:
    """Yaw and pitch of a camera steered by dragging, eased towards its target."""

    sensitivity: float = 0.003
    yaw: float = 0.0
    pitch: float = 0.0
    smoothness: float = 0.5
    _target_yaw: float = field(default=0.0, init=False, repr=False)
    _target_pitch: float = field(default=0.0, init=False, repr=False)

    @property
    def target(self) -> tuple[float, float]:
        return self._target_yaw, self._target_pitch

    def update(self, delta_x: float, delta_y: float, delta_seconds: float) -> tuple[float, float]:
        """Apply a drag movement and advance the easing; return (yaw, pitch)."""
        if delta_x * delta_x + delta_y * delta_y > 0.0:
            self._target_yaw -= delta_x * self.sensitivity
            self._target_pitch -= delta_y * self.sensitivity
            self._target_pitch = min(max(self._target_pitch, -_PITCH_LIMIT), _PITCH_LIMIT)

        factor = 1.0 - self.smoothness ** (delta_seconds * 60.0)
        self.yaw += (self._target_yaw - self.yaw) * factor
        self.pitch += (self._target_pitch - self.pitch) * factor
        return self.yaw, self.pitch


@dataclass
class BatchedPositionUpdate:
    """Cycles through bodies a batch at a time."""

    current_index: int = 0
    batch_size: int = 50

    def next_range(self, total: int) -> range:
        """Indices to update now, out of ``total`` bodies."""
        if total == 0:
            return range(0)
        if self.current_index >= total:
            self.current_index = 0
        start = self.current_index
        end = min(start + self.batch_size, total)
        self.current_index = end
        return range(start, end)