"""A collection of celestial bodies addressed by id."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from skyseeker.bodies import CelestialBody
from skyseeker.errors import BodyNotFoundError
from skyseeker.observer import EarthOrientation, Observer, Position
from skyseeker.timescale import Time


class Skyseeker:
    """Holds loaded bodies by id and computes their positions."""

    def __init__(self) -> None:
        self.bodies_by_id: dict[str, CelestialBody] = {}

    def __len__(self) -> int:
        return len(self.bodies_by_id)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self.bodies_by_id

    def load_body(self, body: CelestialBody) -> None:
        """Add a body, replacing any body with the same id."""
        self.bodies_by_id[body.id] = body

    def load_bodies(self, bodies: Iterable[CelestialBody]) -> None:
        for body in bodies:
            self.load_body(body)

    def load_standard_bodies(self) -> None:
        """Load the planets, the Moon and the Sun."""
        self.load_bodies(CelestialBody.standard_bodies())

    def get_body(self, body_id: str) -> CelestialBody | None:
        return self.bodies_by_id.get(body_id)

    def require_body(self, body_id: str) -> CelestialBody:
        """Return the body with this id or raise :class:`BodyNotFoundError`."""
        try:
            return self.bodies_by_id[body_id]
        except KeyError:
            raise BodyNotFoundError(body_id) from None

    def iter_bodies(self) -> Iterator[CelestialBody]:
        return iter(self.bodies_by_id.values())

    def position(
        self,
        body_id: str,
        observer: Observer,
        time: Time,
        earth_orientation: EarthOrientation,
    ) -> Position:
        """Horizontal position of the body with this id."""
        return self.require_body(body_id).position(observer, time, earth_orientation)