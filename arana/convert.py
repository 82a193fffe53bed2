"""Conversions between driver values and their textual forms."""

from __future__ import annotations

import enum
import math
import random
from decimal import Decimal
from typing import Any

_UINT64_MAX = (1 << 64) - 1

_TRUE_WORDS = frozenset({"1", "true", "TRUE", "True"})
_FALSE_WORDS = frozenset({"0", "false", "FALSE", "False"})


class IsolationLevel(enum.IntEnum):
    """Transaction isolation levels."""

    DEFAULT = 0
    READ_UNCOMMITTED = 1
    READ_COMMITTED = 2
    WRITE_COMMITTED = 3
    REPEATABLE_READ = 4
    SNAPSHOT = 5
    SERIALIZABLE = 6
    LINEARIZABLE = 7


_ISOLATION_NAMES = {
    IsolationLevel.REPEATABLE_READ: "REPEATABLE READ",
    IsolationLevel.READ_COMMITTED: "READ COMMITTED",
    IsolationLevel.READ_UNCOMMITTED: "READ UNCOMMITTED",
    IsolationLevel.SERIALIZABLE: "SERIALIZABLE",
}


def read_bool(value: str) -> bool:
    """Parse a boolean word; raise :class:`ValueError` if it is not one."""
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(f"not a valid bool value: {value!r}")


def uint64_to_string(value: int) -> bytes:
    """Decimal ASCII form of an unsigned 64-bit integer."""
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value {value} is not an unsigned 64-bit integer")
    return str(value).encode("ascii")


def _format_float(value: float) -> str:
    """Shortest form, in exponent notation for exponents below -4 or above 5."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    point = count + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        return f"{sign}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= count:
        return sign + digits + "0" * (point - count)
    return f"{sign}{digits[:point]}.{digits[point:]}"


def as_string(value: Any) -> str:
    """Textual form of a driver value."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", "surrogateescape")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def map_isolation_level(level: int) -> str:
    """SQL name of an isolation level that MySQL supports."""
    try:
        return _ISOLATION_NAMES[IsolationLevel(level)]
    except (ValueError, KeyError):
        raise ValueError(f"mysql: unsupported isolation level: {level}") from None


_RANDOM_MIN = 30
_RANDOM_MAX = 127


def random_buf(size: int) -> bytes:
    """Random bytes in the printable-ASCII range, suitable as a salt."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    rng = random.Random()
    return bytes(rng.randrange(_RANDOM_MIN, _RANDOM_MAX) for _ in range(size))