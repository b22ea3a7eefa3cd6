# skyseeker

skyseeker works out where celestial bodies appear in the sky for an observer
on Earth. Each position is a `Position` with a compass azimuth
(0° = north, 90° = east, 180° = south, 270° = west) and an altitude above the
horizon, both in degrees.

It covers:

- the Sun and the Moon, from short analytic series,
- the planets Mercury through Neptune, from mean orbital elements with a
  light-time correction,
- stars from the Yale Bright Star Catalogue (BSC5), with proper motion,
  precession, nutation and atmospheric refraction applied.

The results are low-precision positions suitable for display and rough
pointing, not for precise astrometry.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Observers and time

`skyseeker.observer.Observer` holds a longitude and a latitude in radians,
east and north positive, plus height (metres), pressure (hPa), temperature
(°C), humidity (fraction) and wavelength (µm). Any of the last five given as
`None` takes its default: 0 m, 1013.25 hPa, 15 °C, 0.5 and 0.55 µm. Of these,
pressure and temperature feed the refraction applied to star positions; the
others are stored but not used in any computation.

Sexagesimal coordinates can be converted with `skyseeker.angles`:

```python
from skyseeker.angles import angle_format_to_radians, time_format_to_radians
from skyseeker.observer import Observer

observer = Observer(
    longitude=angle_format_to_radians("+", 14, 0, 0.0),
    latitude=angle_format_to_radians("+", 51, 0, 0.0),
    height=300.0,
)

right_ascension = time_format_to_radians(" ", 5, 55, 10.3)
```

Only a sign of `"-"` gives a negative result. Degrees must lie in 0..359,
hours in 0..23, minutes in 0..59 and seconds in [0, 60); anything else raises
`AngleFormatError` or `TimeFormatError`, whose `part` attribute names the bad
field. `arc_seconds_to_radians` converts plain arcseconds.

Times are naive UTC values from `skyseeker.timescale.Time`:

```python
from datetime import datetime, timezone

from skyseeker.timescale import Time

time = Time.from_utc(2024, 3, 20, 22, 0, 0.0)
now = Time.now()
also = Time.from_datetime(datetime(2024, 3, 20, 22, 0, tzinfo=timezone.utc))
```

`Time.julian_day()` gives the Julian day and `Time.double_julian()` the
two-part UTC Julian date, taking leap seconds into account. `double_julian`
checks the date and raises `InvalidTimeError` (with a `part` attribute) for a
bad year, month, day, hour, minute or second.

`skyseeker.observer.EarthOrientation` carries polar motion (radians) and
UT1 − UTC (`dut1`, seconds). `dut1` is applied to star positions; polar motion
is stored but not used.

## Sun and Moon

```python
from skyseeker.ephemeris import moon_position, sun_position

sun = sun_position(observer, time)
print(sun.azimuth, sun.altitude)

moon = moon_position(observer, time)
```

`position_from_ecliptic(longitude, latitude, observer, time)` converts any
ecliptic longitude and latitude (radians) into a horizontal position.

## Bodies

`skyseeker.bodies` defines `Planet` (an enum of the seven planets), `Star`
and `CelestialBody`. A `CelestialBody` is made with `CelestialBody.of_star`,
`CelestialBody.of_planet`, `CelestialBody.moon()` or `CelestialBody.sun()`,
and offers `id`, `position(observer, time, earth_orientation)`,
`visual_magnitude`, `constellation` and the `is_star`, `is_planet`, `is_moon`
and `is_sun` flags. `CelestialBody.standard_bodies()` returns the seven
planets, the Moon and the Sun.

## Catalogue of bodies

`skyseeker.catalog.Skyseeker` keeps bodies by identifier: the planet's name,
`"Sun"`, `"Moon"`, or `"HR <number>"` for a catalogue star. Loading a body
with an id already present replaces it.

```python
from skyseeker.catalog import Skyseeker
from skyseeker.observer import EarthOrientation

sky = Skyseeker()
sky.load_standard_bodies()          # seven planets, the Moon and the Sun
mars = sky.get_body("Mars")         # None when the id is unknown
mars = sky.require_body("Mars")     # raises BodyNotFoundError when unknown

where = sky.position("Mars", observer, time, EarthOrientation())

for body in sky.iter_bodies():
    ...

print(len(sky), "Sun" in sky)
```

## Star data

Lists of bodies are stored as zstandard-compressed binary data.
`skyseeker.codec` reads and writes them:

```python
from pathlib import Path

from skyseeker.codec import decode, encode

stars = decode(Path("bsc5-stars.bin").read_bytes())
sky.load_bodies(stars)

Path("copy.bin").write_bytes(encode(stars))
```

Data that cannot be decompressed or decoded raises `CodecError`.

`skyseeker.bsc5.parse` turns the JSON export of the Bright Star Catalogue
into star bodies. Each entry may use either the field names of `Bsc5Entry` or
the catalogue's own names (`HR`, `RAh`, `DE-`, `Vmag`, `pmRA`, ...). Entries
that cannot be converted, for example those without a radial velocity, are
skipped with a logged warning; a document that cannot be read at all raises
`ValueError`. A missing parallax defaults to 0.001″.

The `skyseeker-bsc5` command reads `bsc5-all.json` from a data directory and
writes `bsc5-stars.bin` next to it:

```
skyseeker-bsc5 --data-dir path/to/data
```

Without `--data-dir` it uses `./../data`.

## Scene helpers

`skyseeker.scene` holds small helpers for drawing the sky:

- `magnitude_to_luminance` maps a visual magnitude to a brightness, clamped
  between 0.0001 and 100000.
- `body_scale` gives a display size for each kind of body.
- `sky_position_to_vector` places a `Position` on a sphere of the given
  radius, with y pointing up.
- `DragLookCamera.update` turns mouse drags into smoothed yaw and pitch, with
  pitch limited to ±89°.
- `BatchedPositionUpdate.next_range` hands out the next batch of indices to
  update, wrapping round at the end.

## Errors

Every error the package raises derives from `skyseeker.errors.CoreError`:
`CodecError`, `AngleFormatError`, `TimeFormatError`, `BodyNotFoundError`,
`StarPositionDateError` and `InvalidTimeError`.

## What it does not do

skyseeker computes positions and display values only. It has no window,
3D view or user interface of its own, and it ships no star data file: the
compressed star list has to be produced with `skyseeker-bsc5` from a BSC5
JSON export you supply.