"""Compact binary storage of celestial bodies."""

from __future__ import annotations

import io
import struct
from collections.abc import Iterable

import zstandard

from skyseeker.bodies import BodyKind, CelestialBody, Planet, Star
from skyseeker.errors import CodecError

_COMPRESSION_LEVEL = 22
_PLANETS = list(Planet)
_KINDS = (BodyKind.STAR, BodyKind.PLANET, BodyKind.MOON, BodyKind.SUN)


class _Writer:
    def __init__(self) -> None:
        self.buffer = bytearray()

    def varint(self, value: int) -> None:
        if value < 0:
            raise CodecError(f"negative value cannot be stored: {value}")
        if value < 251:
            self.buffer.append(value)
        elif value <= 0xFFFF:
            self.buffer += b"\xfb" + struct.pack("<H", value)
        elif value <= 0xFFFFFFFF:
            self.buffer += b"\xfc" + struct.pack("<I", value)
        elif value <= 0xFFFFFFFFFFFFFFFF:
            self.buffer += b"\xfd" + struct.pack("<Q", value)
        else:
            raise CodecError(f"value too large: {value}")

    def float(self, value: float) -> None:
        self.buffer += struct.pack("<d", value)

    def string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.varint(len(data))
        self.buffer += data

    def optional(self, value, write) -> None:
        if value is None:
            self.buffer.append(0)
        else:
            self.buffer.append(1)
            write(value)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise CodecError("unexpected end of data")
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def varint(self) -> int:
        tag = self.take(1)[0]
        if tag < 251:
            return tag
        formats = {251: ("<H", 2), 252: ("<I", 4), 253: ("<Q", 8)}
        if tag == 254:
            return int.from_bytes(self.take(16), "little")
        if tag not in formats:
            raise CodecError(f"invalid integer tag: {tag}")
        fmt, size = formats[tag]
        return struct.unpack(fmt, self.take(size))[0]

    def float(self) -> float:
        return struct.unpack("<d", self.take(8))[0]

    def string(self) -> str:
        try:
            return self.take(self.varint()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(f"invalid UTF-8 string: {exc}") from exc

    def optional(self, read):
        tag = self.take(1)[0]
        if tag == 0:
            return None
        if tag == 1:
            return read()
        raise CodecError(f"invalid option tag: {tag}")


def _write_star(writer: _Writer, star: Star) -> None:
    writer.string(star.id)
    if star.hr is not None and not 0 <= star.hr <= 0xFFFF:
        raise CodecError(f"HR number out of range: {star.hr}")
    writer.optional(star.hr, writer.varint)
    for text in (star.name, star.common_name, star.bayer, star.bayer_full, star.constellation):
        writer.optional(text, writer.string)
    writer.varint(len(star.notes))
    for category, remark in star.notes:
        writer.string(category)
        writer.string(remark)
    for value in (
        star.right_ascension,
        star.declination,
        star.proper_motion_right_ascension,
        star.proper_motion_declination,
        star.parallax,
        star.radial_velocity,
        star.visual_magnitude,
    ):
        writer.float(value)
    writer.optional(star.b_v_color, writer.float)


def _read_star(reader: _Reader) -> Star:
    star_id = reader.string()
    hr = reader.optional(reader.varint)
    if hr is not None and hr > 0xFFFF:
        raise CodecError(f"HR number out of range: {hr}")
    name, common_name, bayer, bayer_full, constellation = (
        reader.optional(reader.string) for _ in range(5)
    )
    notes = tuple((reader.string(), reader.string()) for _ in range(reader.varint()))
    ra, dec, pm_ra, pm_dec, parallax, velocity, magnitude = (reader.float() for _ in range(7))
    b_v_color = reader.optional(reader.float)
    return Star(
        id=star_id,
        right_ascension=ra,
        declination=dec,
        proper_motion_right_ascension=pm_ra,
        proper_motion_declination=pm_dec,
        parallax=parallax,
        radial_velocity=velocity,
        visual_magnitude=magnitude,
        hr=hr,
        name=name,
        common_name=common_name,
        bayer=bayer,
        bayer_full=bayer_full,
        constellation=constellation,
        notes=notes,
        b_v_color=b_v_color,
    )


def _read_body(reader: _Reader) -> CelestialBody:
    index = reader.varint()
    if index >= len(_KINDS):
        raise CodecError(f"unknown body variant: {index}")
    kind = _KINDS[index]
    if kind is BodyKind.STAR:
        return CelestialBody.of_star(_read_star(reader))
    if kind is BodyKind.PLANET:
        planet_index = reader.varint()
        if planet_index >= len(_PLANETS):
            raise CodecError(f"unknown planet variant: {planet_index}")
        return CelestialBody.of_planet(_PLANETS[planet_index])
    return CelestialBody(kind)


def encode(bodies: Iterable[CelestialBody]) -> bytes:
    """Serialise bodies and compress the result."""
    items = list(bodies)
    writer = _Writer()
    writer.varint(len(items))
    for body in items:
        writer.varint(_KINDS.index(body.kind))
        if body.kind is BodyKind.STAR:
            _write_star(writer, body.star)
        elif body.kind is BodyKind.PLANET:
            writer.varint(_PLANETS.index(body.planet))
    compressor = zstandard.ZstdCompressor(level=_COMPRESSION_LEVEL)
    return compressor.compress(bytes(writer.buffer))


def decode(data: bytes) -> list[CelestialBody]:
    """Decompress and deserialise bodies written by :func:`encode`."""
    try:
        with zstandard.ZstdDecompressor().stream_reader(io.BytesIO(data)) as stream:
            raw = stream.read()
    except zstandard.ZstdError as exc:
        raise CodecError(f"decompression failed: {exc}") from exc
    reader = _Reader(raw)
    return [_read_body(reader) for _ in range(reader.varint())]