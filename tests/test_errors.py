import pytest

from skyseeker.errors import (
    AngleFormatError,
    BodyNotFoundError,
    CodecError,
    CoreError,
    InvalidTimeError,
    StarPositionDateError,
    TimeFormatError,
)


@pytest.mark.parametrize(
    "part, message",
    [
        ("hours", "Unable to convert angle format to radians: bad hours"),
        ("minutes", "Unable to convert angle format to radians: bad minutes"),
        ("seconds", "Unable to convert angle format to radians: bad seconds"),
        (None, "Unable to convert angle format to radians"),
    ],
)
def test_angle_format_messages(part, message):
    error = AngleFormatError(part)
    assert str(error) == message
    assert error.part == part


@pytest.mark.parametrize(
    "part, message",
    [
        ("hours", "Unable to convert time format to radians: bad hours"),
        ("minutes", "Unable to convert time format to radians: bad minutes"),
        ("seconds", "Unable to convert time format to radians: bad seconds"),
        (None, "Unable to convert time format to radians"),
    ],
)
def test_time_format_messages(part, message):
    assert str(TimeFormatError(part)) == message


@pytest.mark.parametrize(
    "part, message",
    [
        ("year", "Invalid time: bad year"),
        ("month", "Invalid time: bad month"),
        ("day", "Invalid time: bad day"),
        ("hour", "Invalid time: bad hour"),
        ("minute", "Invalid time: bad minute"),
        ("second", "Invalid time: bad second"),
        (None, "Invalid time: unknown"),
    ],
)
def test_invalid_time_messages(part, message):
    assert str(InvalidTimeError(part)) == message


def test_body_not_found_message_and_id():
    error = BodyNotFoundError("HR 5340")
    assert str(error) == "Body not found: id = 'HR 5340'"
    assert error.body_id == "HR 5340"
    assert isinstance(error, LookupError)


def test_star_position_date_message():
    assert str(StarPositionDateError()) == "Unable to calculate star position: invalid date"


def test_codec_error_keeps_message():
    error = CodecError("I/O error: broken")
    assert str(error) == "I/O error: broken"
    assert isinstance(error, CoreError)


@pytest.mark.parametrize(
    "error, message",
    [
        (AngleFormatError("hours"), "Unable to convert angle format to radians: bad hours"),
        (TimeFormatError(), "Unable to convert time format to radians"),
        (InvalidTimeError("day"), "Invalid time: bad day"),
        (StarPositionDateError(), "Unable to calculate star position: invalid date"),
    ],
)
def test_value_errors_are_core_errors(error, message):
    with pytest.raises(CoreError) as core_info:
        raise error
    assert core_info.value is error
    assert str(core_info.value) == message
    with pytest.raises(ValueError) as value_info:
        raise error
    assert value_info.value is error


def test_unknown_parts_rejected():
    with pytest.raises(ValueError):
        AngleFormatError("days")
    with pytest.raises(ValueError):
        InvalidTimeError("hours")