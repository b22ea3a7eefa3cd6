"""UTC calendar times and their Julian-day forms."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from skyseeker.errors import InvalidTimeError

_MJD_ZERO = 2400000.5
_MIN_YEAR = -4799
_SECONDS_PER_DAY = 86400.0
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# (year, month, TAI - UTC in seconds at the start of that month)
_LEAP_STEPS = (
    (1960, 1, 1.4178180),
    (1961, 1, 1.4228180),
    (1961, 8, 1.3728180),
    (1962, 1, 1.8458580),
    (1963, 11, 1.9458580),
    (1964, 1, 3.2401300),
    (1964, 4, 3.3401300),
    (1964, 9, 3.4401300),
    (1965, 1, 3.5401300),
    (1965, 3, 3.6401300),
    (1965, 7, 3.7401300),
    (1965, 9, 3.8401300),
    (1966, 1, 4.3131700),
    (1968, 2, 4.2131700),
    (1972, 1, 10.0),
    (1972, 7, 11.0),
    (1973, 1, 12.0),
    (1974, 1, 13.0),
    (1975, 1, 14.0),
    (1976, 1, 15.0),
    (1977, 1, 16.0),
    (1978, 1, 17.0),
    (1979, 1, 18.0),
    (1980, 1, 19.0),
    (1981, 7, 20.0),
    (1982, 7, 21.0),
    (1983, 7, 22.0),
    (1985, 7, 23.0),
    (1988, 1, 24.0),
    (1990, 1, 25.0),
    (1991, 1, 26.0),
    (1992, 7, 27.0),
    (1993, 7, 28.0),
    (1994, 7, 29.0),
    (1996, 1, 30.0),
    (1997, 7, 31.0),
    (1999, 1, 32.0),
    (2006, 1, 33.0),
    (2009, 1, 34.0),
    (2012, 7, 35.0),
    (2015, 7, 36.0),
    (2017, 1, 37.0),
)

# Rate terms (reference MJD, seconds per day) for the pre-1972 steps.
_DRIFT = (
    (37300.0, 0.0012960),
    (37300.0, 0.0012960),
    (37300.0, 0.0012960),
    (37665.0, 0.0011232),
    (37665.0, 0.0011232),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (38761.0, 0.0012960),
    (39126.0, 0.0025920),
    (39126.0, 0.0025920),
)


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    return _MONTH_DAYS[month - 1] + (1 if month == 2 and _is_leap_year(year) else 0)


def _modified_julian_day(year: int, month: int, day: int) -> int:
    """Modified Julian Day of a Gregorian calendar date at 0h."""
    if year < _MIN_YEAR:
        raise InvalidTimeError("year")
    if not 1 <= month <= 12:
        raise InvalidTimeError("month")
    if not 1 <= day <= _days_in_month(year, month):
        raise InvalidTimeError("day")
    shift = -1 if month <= 2 else 0
    shifted_year = year + shift
    return (
        (1461 * (shifted_year + 4800)) // 4
        + (367 * (month - 2 - 12 * shift)) // 12
        - (3 * ((shifted_year + 4900) // 100)) // 4
        + day
        - 2432076
    )


def _next_day(year: int, month: int, day: int) -> tuple[int, int, int]:
    if day < _days_in_month(year, month):
        return year, month, day + 1
    if month < 12:
        return year, month + 1, 1
    return year + 1, 1, 1


def _tai_minus_utc(year: int, month: int, mjd: int, fraction: float) -> float:
    """TAI - UTC in seconds; zero before UTC was defined."""
    key = 12 * year + month
    for index in range(len(_LEAP_STEPS) - 1, -1, -1):
        step_year, step_month, delta = _LEAP_STEPS[index]
        if key >= 12 * step_year + step_month:
            if index < len(_DRIFT):
                reference, rate = _DRIFT[index]
                delta += (mjd + fraction - reference) * rate
            return delta
    return 0.0


@dataclass(frozen=True)
class Time:
    """A naive UTC date and time on the Gregorian calendar."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float

    @classmethod
    def from_utc(
        cls, year: int, month: int, day: int, hour: int, minute: int, second: float
    ) -> Time:
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Time:
        """Build a time from a datetime; a naive datetime is taken as UTC."""
        utc = dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt.astimezone(timezone.utc)
        second = utc.second + utc.microsecond / 1_000_000
        return cls(utc.year, utc.month, utc.day, utc.hour, utc.minute, second)

    @classmethod
    def now(cls) -> Time:
        return cls.from_datetime(datetime.now(timezone.utc))

    def double_julian(self) -> tuple[float, float]:
        """Return the UTC two-part quasi Julian date.

        The first part is the Julian date at 0h of the day, the second the
        fraction of the day, taking a leap second at the end of the day into
        account. Seconds beyond the end of the day are accepted.
        """
        mjd = _modified_julian_day(self.year, self.month, self.day)
        day_length = _SECONDS_PER_DAY
        if self.year >= _LEAP_STEPS[0][0]:
            at_start = _tai_minus_utc(self.year, self.month, mjd, 0.0)
            at_noon = _tai_minus_utc(self.year, self.month, mjd, 0.5)
            next_year, next_month, _ = _next_day(self.year, self.month, self.day)
            at_end = _tai_minus_utc(next_year, next_month, mjd + 1, 0.0)
            day_length += at_end - (2.0 * at_noon - at_start)
        if not 0 <= self.hour <= 23:
            raise InvalidTimeError("hour")
        if not 0 <= self.minute <= 59:
            raise InvalidTimeError("minute")
        if self.second < 0.0:
            raise InvalidTimeError("second")
        fraction = (60.0 * (60 * self.hour + self.minute) + self.second) / day_length
        return _MJD_ZERO + mjd, fraction

    def decimal_day(self) -> float:
        """Day of the month with the time of day as its fractional part."""
        return self.day + self.hour / 24.0 + self.minute / 1440.0 + self.second / 86400.0

    def julian_day(self) -> float:
        """Julian day of this time, counting every day as 86400 seconds."""
        if self.month in (1, 2):
            year, month = self.year - 1, self.month + 12
        else:
            year, month = self.year, self.month
        century = int(year / 100.0)
        correction = 2 - century + int(century / 4.0)
        return (
            float(int(365.25 * (year + 4716.0)))
            + float(int(30.6001 * (month + 1.0)))
            + correction
            + self.decimal_day()
            - 1524.5
        )