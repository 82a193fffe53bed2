"""Parsing and formatting of MySQL date, datetime and time values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

# The value a zero date such as 0000-00-00 reads as.
ZERO_DATETIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# Textual zero datetime; slices of it are used for zero values.
ZERO_DATETIME_TEXT = b"0000-00-00 00:00:00.000000"

_TEXT_LENGTHS = frozenset({10, 19, 21, 22, 23, 24, 25, 26})
_TIME_LENGTHS = frozenset({8, 10, 11, 12, 13, 14, 15})


def _make(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: Optional[tzinfo] = None,
) -> datetime:
    """Build a datetime, carrying out-of-range fields into the larger ones."""
    try:
        base = datetime(year + (month - 1) // 12, (month - 1) % 12 + 1, 1, tzinfo=tz)
        return base + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            microseconds=microsecond,
        )
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"date out of range: {exc}") from None


def _digit(byte: int) -> int:
    if not 0x30 <= byte <= 0x39:
        raise ValueError("not [0-9]")
    return byte - 0x30


def _number(raw: Buffer) -> int:
    value = 0
    for byte in raw:
        value = value * 10 + _digit(byte)
    return value


def _expect(raw: bytes, pos: int, sep: str) -> None:
    if raw[pos] != ord(sep):
        raise ValueError(f"bad value for field: `{chr(raw[pos])}`")


def parse_date_time(data: Buffer, tz: Optional[tzinfo] = None) -> datetime:
    """Parse ``YYYY-MM-DD[ HH:MM:SS[.ffffff]]`` text into a datetime.

    Zero dates read as :data:`ZERO_DATETIME`; a zero year, month or day is
    taken as 1.
    """
    raw = bytes(data)
    if len(raw) not in _TEXT_LENGTHS:
        text = raw.decode("utf-8", "replace")
        raise ValueError(f"invalid time bytes: {text}")
    if raw == ZERO_DATETIME_TEXT[: len(raw)]:
        return ZERO_DATETIME

    year = max(_number(raw[0:4]), 1)
    _expect(raw, 4, "-")
    month = max(_number(raw[5:7]), 1)
    _expect(raw, 7, "-")
    day = max(_number(raw[8:10]), 1)
    if len(raw) == 10:
        return _make(year, month, day, tz=tz)

    _expect(raw, 10, " ")
    hour = _number(raw[11:13])
    _expect(raw, 13, ":")
    minute = _number(raw[14:16])
    _expect(raw, 16, ":")
    second = _number(raw[17:19])
    if len(raw) == 19:
        return _make(year, month, day, hour, minute, second, tz=tz)

    _expect(raw, 19, ".")
    fraction = raw[20:]
    microsecond = _number(fraction) * 10 ** (6 - len(fraction))
    return _make(year, month, day, hour, minute, second, microsecond, tz=tz)


def parse_binary_date_time(num: int, data: Buffer, tz: Optional[tzinfo] = None) -> datetime:
    """Decode a binary-protocol date or datetime of ``num`` bytes."""
    if num == 0:
        return ZERO_DATETIME
    if num not in (4, 7, 11):
        raise ValueError(f"invalid DATETIME packet length {num}")
    raw = bytes(data)
    if len(raw) < num:
        raise ValueError(f"DATETIME packet needs {num} bytes, got {len(raw)}")
    year = int.from_bytes(raw[0:2], "little")
    if num == 4:
        return _make(year, raw[2], raw[3], tz=tz)
    if num == 7:
        return _make(year, raw[2], raw[3], raw[4], raw[5], raw[6], tz=tz)
    microsecond = int.from_bytes(raw[7:11], "little")
    return _make(year, raw[2], raw[3], raw[4], raw[5], raw[6], microsecond, tz=tz)


def format_date_time(value: datetime) -> bytes:
    """Format ``value`` as MySQL datetime text, leaving out zero parts."""
    date_part = f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    if not (value.hour or value.minute or value.second or value.microsecond):
        return date_part.encode("ascii")
    text = f"{date_part} {value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += "." + f"{value.microsecond * 1000:09d}".rstrip("0")
    return text.encode("ascii")


def _two(value: int) -> str:
    if value > 99:
        raise ValueError(f"value {value} does not fit in two digits")
    return f"{value:02d}"


def _microsecs(src: bytes, decimals: int) -> str:
    if decimals <= 0:
        return ""
    if not src:
        return ".000000"[: decimals + 1]
    micro = int.from_bytes(src[:4], "little")
    if micro > 999999:
        raise ValueError(f"microseconds out of range: {micro}")
    return "." + f"{micro:06d}"[: min(decimals, 6)]


def _kind(length: int) -> str:
    return "DATETIME" if length > 10 else "DATE"


def format_binary_date_time(src: Buffer, length: int) -> bytes:
    """Format a binary-protocol date or datetime as text of ``length`` bytes."""
    raw = bytes(src)
    if not raw:
        return ZERO_DATETIME_TEXT[:length]
    if length not in _TEXT_LENGTHS:
        raise ValueError(f"illegal {_kind(length)} length {length}")
    if len(raw) not in (4, 7, 11):
        raise ValueError(f"illegal {_kind(length)} packet length {len(raw)}")

    year = int.from_bytes(raw[0:2], "little")
    text = f"{_two(year // 100)}{_two(year % 100)}-{_two(raw[2])}-{_two(raw[3])}"
    if length == 10:
        return text.encode("ascii")
    if len(raw) == 4:
        return text.encode("ascii") + ZERO_DATETIME_TEXT[10:length]
    text += f" {_two(raw[4])}:{_two(raw[5])}:{_two(raw[6])}"
    text += _microsecs(raw[7:], length - 20)
    return text.encode("ascii")


def format_binary_time(src: Buffer, length: int) -> bytes:
    """Format a binary-protocol time as text of nominal ``length`` bytes.

    A negative sign and hours of 100 or more lengthen the result as needed.
    """
    raw = bytes(src)
    if not raw:
        return ZERO_DATETIME_TEXT[11 : 11 + length]
    if length not in _TIME_LENGTHS:
        raise ValueError(f"illegal TIME length {length}")
    if len(raw) not in (8, 12):
        raise ValueError(f"invalid TIME packet length {len(raw)}")

    text = "-" if raw[0] == 1 else ""
    days = int.from_bytes(raw[1:5], "little")
    hours = days * 24 + raw[5]
    text += str(hours) if hours >= 100 else _two(hours)
    text += f":{_two(raw[6])}:{_two(raw[7])}"
    text += _microsecs(raw[8:], length - 9)
    return text.encode("ascii")