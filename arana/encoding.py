"""Encoding and decoding of the primitive values of the MySQL wire protocol.

Encoders return fresh ``bytes``.  Readers take a buffer and a starting
position and return the decoded value together with the position just after
it; they raise :class:`DecodeError` when the buffer is too short.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
Text = Union[str, bytes, bytearray]

_UINT64_MAX = (1 << 64) - 1


class DecodeError(ValueError):
    """Raised when a buffer does not hold the value that was asked for."""


def _as_bytes(value: Text) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    return bytes(value)


def _as_text(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _check_uint64(value: int) -> None:
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value {value} is not an unsigned 64-bit integer")


# Encoding.


def len_enc_int_size(value: int) -> int:
    """Number of bytes needed to encode ``value`` as a length-encoded integer."""
    _check_uint64(value)
    if value < 251:
        return 1
    if value < 1 << 16:
        return 3
    if value < 1 << 24:
        return 4
    return 9


def encode_len_enc_int(value: int) -> bytes:
    """Encode ``value`` as a length-encoded integer."""
    _check_uint64(value)
    if value < 251:
        return bytes((value,))
    if value < 1 << 16:
        return b"\xfc" + value.to_bytes(2, "little")
    if value < 1 << 24:
        return b"\xfd" + value.to_bytes(3, "little")
    return b"\xfe" + value.to_bytes(8, "little")


def len_enc_string_size(value: Text) -> int:
    """Number of bytes needed to encode ``value`` as a length-encoded string."""
    length = len(_as_bytes(value))
    return len_enc_int_size(length) + length


def encode_len_enc_string(value: Text) -> bytes:
    """Encode ``value`` prefixed with its length as a length-encoded integer."""
    raw = _as_bytes(value)
    return encode_len_enc_int(len(raw)) + raw


def encode_null_string(value: Text) -> bytes:
    """Encode ``value`` followed by a terminating zero byte."""
    return _as_bytes(value) + b"\x00"


def encode_uint16(value: int) -> bytes:
    """Little-endian two-byte encoding of ``value``."""
    return value.to_bytes(2, "little")


def encode_uint32(value: int) -> bytes:
    """Little-endian four-byte encoding of ``value``."""
    return value.to_bytes(4, "little")


def encode_uint64(value: int) -> bytes:
    """Little-endian eight-byte encoding of ``value``."""
    return value.to_bytes(8, "little")


# Decoding.


def read_byte(data: Buffer, pos: int) -> tuple[int, int]:
    """Read one byte at ``pos``."""
    if pos >= len(data):
        raise DecodeError(f"cannot read a byte at position {pos}")
    return data[pos], pos + 1


def read_bytes(data: Buffer, pos: int, size: int) -> tuple[bytes, int]:
    """Read ``size`` bytes starting at ``pos`` (returned as a copy)."""
    if pos + size > len(data):
        raise DecodeError(f"cannot read {size} bytes at position {pos}")
    return bytes(data[pos : pos + size]), pos + size


def read_null_string(data: Buffer, pos: int) -> tuple[str, int]:
    """Read a zero-terminated string starting at ``pos``."""
    raw = bytes(data[pos:])
    end = raw.find(0)
    if end == -1:
        raise DecodeError(f"no string terminator after position {pos}")
    return _as_text(raw[:end]), pos + end + 1


def read_eof_string(data: Buffer, pos: int) -> tuple[str, int]:
    """Read the rest of the buffer from ``pos`` as a string."""
    return _as_text(bytes(data[pos:])), len(data)


def read_uint16(data: Buffer, pos: int) -> tuple[int, int]:
    """Read a little-endian unsigned 16-bit integer."""
    raw, pos = _read_fixed(data, pos, 2)
    return int.from_bytes(raw, "little"), pos


def read_uint32(data: Buffer, pos: int) -> tuple[int, int]:
    """Read a little-endian unsigned 32-bit integer."""
    raw, pos = _read_fixed(data, pos, 4)
    return int.from_bytes(raw, "little"), pos


def read_uint64(data: Buffer, pos: int) -> tuple[int, int]:
    """Read a little-endian unsigned 64-bit integer."""
    raw, pos = _read_fixed(data, pos, 8)
    return int.from_bytes(raw, "little"), pos


def _read_fixed(data: Buffer, pos: int, size: int) -> tuple[bytes, int]:
    if pos + size > len(data):
        raise DecodeError(f"cannot read a {size * 8}-bit integer at position {pos}")
    return bytes(data[pos : pos + size]), pos + size


_LEN_ENC_WIDTHS = {0xFC: 2, 0xFD: 3, 0xFE: 8}


def read_len_enc_int(data: Buffer, pos: int) -> tuple[int, int]:
    """Read a length-encoded integer starting at ``pos``.

    Any first byte other than 0xfc, 0xfd and 0xfe is taken as the value itself.
    """
    if pos >= len(data):
        raise DecodeError(f"cannot read a length-encoded integer at position {pos}")
    first = data[pos]
    width = _LEN_ENC_WIDTHS.get(first)
    if width is None:
        return first, pos + 1
    if pos + width >= len(data):
        raise DecodeError(f"truncated length-encoded integer at position {pos}")
    raw = bytes(data[pos + 1 : pos + 1 + width])
    return int.from_bytes(raw, "little"), pos + 1 + width


def read_len_enc_bytes(data: Buffer, pos: int) -> tuple[bytes, int]:
    """Read a length-encoded string as bytes (a copy)."""
    size, pos = read_len_enc_int(data, pos)
    if pos + size > len(data):
        raise DecodeError(f"truncated length-encoded string at position {pos}")
    return bytes(data[pos : pos + size]), pos + size


def read_len_enc_string(data: Buffer, pos: int) -> tuple[str, int]:
    """Read a length-encoded string."""
    raw, pos = read_len_enc_bytes(data, pos)
    return _as_text(raw), pos


def skip_len_enc_string(data: Buffer, pos: int) -> int:
    """Return the position just after the length-encoded string at ``pos``."""
    size, pos = read_len_enc_int(data, pos)
    if pos + size > len(data):
        raise DecodeError(f"truncated length-encoded string at position {pos}")
    return pos + size


# Row-level helpers working from the start of a buffer.


def read_length_encoded_integer(data: Buffer) -> tuple[int, bool, int]:
    """Read a length-encoded integer at the start of ``data``.

    Returns ``(value, is_null, bytes_read)``.  An empty buffer and the 0xfb
    marker both read as NULL.
    """
    if len(data) == 0:
        return 0, True, 1
    first = data[0]
    if first == 0xFB:
        return 0, True, 1
    width = _LEN_ENC_WIDTHS.get(first)
    if width is None:
        return first, False, 1
    if len(data) < width + 1:
        raise DecodeError("truncated length-encoded integer")
    return int.from_bytes(bytes(data[1 : 1 + width]), "little"), False, width + 1


def read_length_encoded_string(data: Buffer) -> tuple[bytes, bool, int]:
    """Read a length-encoded string at the start of ``data``.

    Returns ``(value, is_null, bytes_read)``.
    """
    num, is_null, n = read_length_encoded_integer(data)
    if num < 1:
        return b"", is_null, n
    end = n + num
    if len(data) < end:
        raise DecodeError(f"length-encoded string needs {end} bytes, got {len(data)}")
    return bytes(data[n:end]), False, end


def skip_length_encoded_string(data: Buffer) -> int:
    """Return how many bytes the length-encoded string at the start takes."""
    num, _, n = read_length_encoded_integer(data)
    if num < 1:
        return n
    end = n + num
    if len(data) < end:
        raise DecodeError(f"length-encoded string needs {end} bytes, got {len(data)}")
    return end


def append_length_encoded_integer(buf: Buffer, value: int) -> bytes:
    """Return ``buf`` followed by ``value`` as a length-encoded integer."""
    _check_uint64(value)
    if value <= 250:
        encoded = bytes((value,))
    elif value <= 0xFFFF:
        encoded = b"\xfc" + value.to_bytes(2, "little")
    elif value <= 0xFFFFFF:
        encoded = b"\xfd" + value.to_bytes(3, "little")
    else:
        encoded = b"\xfe" + value.to_bytes(8, "little")
    return bytes(buf) + encoded