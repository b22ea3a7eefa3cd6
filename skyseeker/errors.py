"""Exceptions raised by skyseeker."""

from __future__ import annotations


class CoreError(Exception):
    """Base class of every error raised by skyseeker."""


class CodecError(CoreError):
    """Raised when body data cannot be encoded, decoded or read."""


class _RadiansFormatError(CoreError, ValueError):
    """Shared behaviour of sexagesimal-to-radians conversion errors."""

    SUBJECT = ""
    PARTS = ("hours", "minutes", "seconds")

    def __init__(self, part: str | None = None) -> None:
        if part is not None and part not in self.PARTS:
            raise ValueError(f"unknown format part: {part!r}")
        self.part = part
        message = f"Unable to convert {self.SUBJECT} format to radians"
        if part is not None:
            message += f": bad {part}"
        super().__init__(message)


class AngleFormatError(_RadiansFormatError):
    """Raised when degrees, arcminutes and arcseconds do not form a valid angle."""

    SUBJECT = "angle"


class TimeFormatError(_RadiansFormatError):
    """Raised when hours, minutes and seconds do not form a valid angle."""

    SUBJECT = "time"


class BodyNotFoundError(CoreError, LookupError):
    """Raised when no body with the requested id is loaded."""

    def __init__(self, body_id: str) -> None:
        self.body_id = body_id
        super().__init__(f"Body not found: id = '{body_id}'")


class StarPositionDateError(CoreError, ValueError):
    """Raised when a star position cannot be computed for the given date."""

    def __init__(self) -> None:
        super().__init__("Unable to calculate star position: invalid date")


class InvalidTimeError(CoreError, ValueError):
    """Raised when a calendar date and clock time are not valid."""

    PARTS = ("year", "month", "day", "hour", "minute", "second")

    def __init__(self, part: str | None = None) -> None:
        if part is not None and part not in self.PARTS:
            raise ValueError(f"unknown time part: {part!r}")
        self.part = part
        detail = f"bad {part}" if part is not None else "unknown"
        super().__init__(f"Invalid time: {detail}")