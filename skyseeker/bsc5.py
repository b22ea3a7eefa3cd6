"""Reading the Yale Bright Star Catalogue (BSC5) from its JSON form."""

from __future__ import annotations

import argparse
import json
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skyseeker.angles import (
    angle_format_to_radians,
    arc_seconds_to_radians,
    time_format_to_radians,
)
from skyseeker.bodies import CelestialBody, Star
from skyseeker.codec import encode

logger = logging.getLogger(__name__)

_UINT = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF
_DEFAULT_PARALLAX = "0.001"


def _parse_uint(text: str, limit: int) -> int:
    if not _UINT.fullmatch(text):
        raise ValueError(f"invalid digit found in string: {text!r}")
    value = int(text)
    if value > limit:
        raise ValueError(f"number too large to fit in target type: {text!r}")
    return value


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"expected a single character: {text!r}")
    return text


def _field_key(data: Mapping[str, Any], name: str, alias: str) -> str | None:
    present = [key for key in dict.fromkeys((name, alias)) if key in data]
    if len(present) > 1:
        raise ValueError(f"duplicate field `{name}`")
    return present[0] if present else None


def _required_str(data: Mapping[str, Any], name: str, alias: str) -> str:
    key = _field_key(data, name, alias)
    if key is None:
        raise ValueError(f"missing field `{name}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{name}`: expected a string")
    return value


def _optional_str(data: Mapping[str, Any], name: str, alias: str) -> str | None:
    key = _field_key(data, name, alias)
    if key is None or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{name}`: expected a string")
    return value


@dataclass(frozen=True)
class Bsc5Note:
    """A remark attached to a catalogue entry."""

    category: str
    remark: str

    @classmethod
    def from_mapping(cls, data: Any) -> Bsc5Note:
        if not isinstance(data, Mapping):
            raise ValueError("invalid type for note: expected an object")
        return cls(
            category=_required_str(data, "category", "Category"),
            remark=_required_str(data, "remark", "Remark"),
        )


_REQUIRED = (
    ("hr", "HR"),
    ("right_ascension_hours", "RAh"),
    ("right_ascension_minutes", "RAm"),
    ("right_ascension_seconds", "RAs"),
    ("declination_sign", "DE-"),
    ("declination_degrees", "DEd"),
    ("declination_minutes", "DEm"),
    ("declination_seconds", "DEs"),
    ("visual_magnitude", "Vmag"),
    ("proper_motion_right_ascension", "pmRA"),
    ("proper_motion_declination", "pmDE"),
)

_OPTIONAL = (
    ("name", "Name"),
    ("common", "Common"),
    ("bayer", "Bayer"),
    ("bayer_full", "BayerF"),
    ("constellation", "Constellation"),
    ("heliocentric_radial_velocity", "RadVel"),
    ("parallax", "Parallax"),
    ("b_v_color", "B-V"),
)


@dataclass
class Bsc5Entry:
    """One raw catalogue record; every value is still text.

    Right ascension and declination are for equinox J2000, proper motions
    in arcseconds per year, radial velocity in km/s, parallax in arcseconds.
    """

    hr: str
    right_ascension_hours: str
    right_ascension_minutes: str
    right_ascension_seconds: str
    declination_sign: str
    declination_degrees: str
    declination_minutes: str
    declination_seconds: str
    visual_magnitude: str
    proper_motion_right_ascension: str
    proper_motion_declination: str
    name: str | None = None
    common: str | None = None
    bayer: str | None = None
    bayer_full: str | None = None
    constellation: str | None = None
    notes: list[Bsc5Note] = field(default_factory=list)
    heliocentric_radial_velocity: str | None = None
    parallax: str | None = None
    b_v_color: str | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> Bsc5Entry:
        """Build an entry from a JSON object, accepting field names or catalogue aliases."""
        if not isinstance(data, Mapping):
            raise ValueError("invalid type for entry: expected an object")
        values: dict[str, Any] = {name: _required_str(data, name, alias) for name, alias in _REQUIRED}
        values.update((name, _optional_str(data, name, alias)) for name, alias in _OPTIONAL)
        notes_key = _field_key(data, "notes", "Notes")
        if notes_key is not None:
            raw_notes = data[notes_key]
            if not isinstance(raw_notes, list):
                raise ValueError("invalid type for `notes`: expected a sequence")
            values["notes"] = [Bsc5Note.from_mapping(note) for note in raw_notes]
        return cls(**values)

    def to_star(self) -> Star:
        """Convert the text fields into a :class:`Star`; raises ValueError on bad data."""
        try:
            hr = _parse_uint(self.hr, _U16_MAX)
        except ValueError as exc:
            raise ValueError("failed to parse HR") from exc

        try:
            right_ascension = time_format_to_radians(
                " ",
                _parse_uint(self.right_ascension_hours, _U32_MAX),
                _parse_uint(self.right_ascension_minutes, _U32_MAX),
                _parse_float(self.right_ascension_seconds),
            )
        except ValueError as exc:
            raise ValueError("failed to parse right ascension") from exc

        try:
            declination = angle_format_to_radians(
                _parse_char(self.declination_sign),
                _parse_uint(self.declination_degrees, _U32_MAX),
                _parse_uint(self.declination_minutes, _U32_MAX),
                _parse_float(self.declination_seconds),
            )
        except ValueError as exc:
            raise ValueError("failed to parse declination") from exc

        try:
            pm_ra = arc_seconds_to_radians(_parse_float(self.proper_motion_right_ascension))
            pm_dec = arc_seconds_to_radians(_parse_float(self.proper_motion_declination))
        except ValueError as exc:
            raise ValueError("failed to parse proper motion") from exc

        try:
            parallax = _parse_float(
                self.parallax if self.parallax is not None else _DEFAULT_PARALLAX
            )
        except ValueError as exc:
            raise ValueError("failed to parse parallax") from exc

        if self.heliocentric_radial_velocity is None:
            raise ValueError("missing radial velocity")
        try:
            radial_velocity = _parse_float(self.heliocentric_radial_velocity)
        except ValueError as exc:
            raise ValueError("failed to parse radial velocity") from exc

        try:
            visual_magnitude = _parse_float(self.visual_magnitude)
        except ValueError as exc:
            raise ValueError("failed to parse visual magnitude") from exc

        b_v_color = None
        if self.b_v_color is not None:
            try:
                b_v_color = _parse_float(self.b_v_color)
            except ValueError as exc:
                raise ValueError("failed to parse B-V color") from exc

        return Star(
            id=f"HR {hr}",
            hr=hr,
            name=self.name,
            common_name=self.common,
            bayer=self.bayer,
            bayer_full=self.bayer_full,
            constellation=self.constellation,
            notes=tuple((note.category, note.remark) for note in self.notes),
            right_ascension=right_ascension,
            declination=declination,
            proper_motion_right_ascension=pm_ra,
            proper_motion_declination=pm_dec,
            parallax=parallax,
            radial_velocity=radial_velocity,
            visual_magnitude=visual_magnitude,
            b_v_color=b_v_color,
        )


def parse(data: str | bytes) -> list[CelestialBody]:
    """Parse BSC5 JSON into star bodies, skipping entries that cannot be converted.

    Raises ValueError when the document itself cannot be read.
    """
    try:
        raw = json.loads(data)
        if not isinstance(raw, list):
            raise ValueError("invalid type: expected a sequence of entries")
        entries = [Bsc5Entry.from_mapping(item) for item in raw]
    except ValueError as exc:
        raise ValueError(f"Failed to deserialize BSC5 data: {exc}") from exc

    stars = []
    for entry in entries:
        try:
            stars.append(CelestialBody.of_star(entry.to_star()))
        except ValueError as exc:
            logger.warning("Skipping entry 'HR = %s' in BSC5: %s", entry.hr, exc)
    return stars


def main(argv: Sequence[str] | None = None) -> int:
    """Convert ``bsc5-all.json`` in the data directory into ``bsc5-stars.bin``."""
    parser = argparse.ArgumentParser(
        prog="skyseeker-bsc5",
        description="Convert the BSC5 JSON catalogue into compressed star data.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("./../data"),
        help="directory holding bsc5-all.json and receiving bsc5-stars.bin",
    )
    args = parser.parse_args(argv)
    source = args.data_dir / "bsc5-all.json"
    target = args.data_dir / "bsc5-stars.bin"
    stars = parse(source.read_text(encoding="utf-8"))
    target.write_bytes(encode(stars))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())