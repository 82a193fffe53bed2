"""Escaping of string values for use inside SQL text."""

from __future__ import annotations

from typing import Mapping, Union

Escapable = Union[str, bytes, bytearray, memoryview]

# Characters escaped with a backslash when backslash escapes are in effect.
_BACKSLASH_ESCAPES = {
    "\x00": "0",
    "\n": "n",
    "\r": "r",
    "\x1a": "Z",
    "'": "'",
    '"': '"',
    "\\": "\\",
}

# Characters escaped by :func:`escape`.
_SQL_ESCAPES = {
    "\x00": "0",
    "'": "'",
    '"': '"',
    "\b": "b",
    "\n": "n",
    "\r": "r",
    "\t": "t",
    "\x1a": "Z",
    "\\": "\\",
}

_QUOTE_ESCAPES = {"'": "''"}


def _str_table(mapping: Mapping[str, str], prefix: str) -> dict[int, str]:
    return {ord(char): prefix + repl for char, repl in mapping.items()}


def _bytes_table(table: Mapping[int, str]) -> dict[int, bytes]:
    return {code: repl.encode("ascii") for code, repl in table.items()}


_BACKSLASH_STR = _str_table(_BACKSLASH_ESCAPES, "\\")
_BACKSLASH_BYTES = _bytes_table(_BACKSLASH_STR)
_QUOTES_STR = _str_table(_QUOTE_ESCAPES, "")
_QUOTES_BYTES = _bytes_table(_QUOTES_STR)
_SQL_STR = _str_table(_SQL_ESCAPES, "\\")


def _apply(value: Escapable, text_table: dict[int, str], byte_table: dict[int, bytes]):
    if isinstance(value, str):
        return value.translate(text_table)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return b"".join(byte_table.get(byte, bytes((byte,))) for byte in bytes(value))
    raise TypeError(f"cannot escape a value of type {type(value).__name__}")


def escape_backslash(value: Escapable):
    """Escape special characters with backslashes.

    NUL, newline, carriage return, Ctrl-Z, both quotes and the backslash are
    escaped.  A ``str`` gives a ``str``; bytes-like input gives ``bytes``.
    """
    return _apply(value, _BACKSLASH_STR, _BACKSLASH_BYTES)


def escape_quotes(value: Escapable):
    """Escape apostrophes by doubling them, for NO_BACKSLASH_ESCAPES mode."""
    return _apply(value, _QUOTES_STR, _QUOTES_BYTES)


def escape(sql: str) -> str:
    """Escape exceptional characters of ``sql`` with backslashes.

    Besides the characters :func:`escape_backslash` handles, backspace and tab
    are escaped too.
    """
    if not isinstance(sql, str):
        raise TypeError(f"cannot escape a value of type {type(sql).__name__}")
    return sql.translate(_SQL_STR)