import re

import pytest

from arana.escaping import escape, escape_backslash, escape_quotes

_UNESCAPE = {
    "0": "\x00",
    "n": "\n",
    "r": "\r",
    "Z": "\x1a",
    "'": "'",
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "t": "\t",
}


def unescape(text):
    return re.sub(r"\\(.)", lambda m: _UNESCAPE[m.group(1)], text, flags=re.S)


SAMPLES = [
    "plain",
    "it's",
    'say "hi"',
    "line\nbreak\r\n",
    "nul\x00byte",
    "ctrl\x1az",
    "back\\slash",
    "tab\tand\bback",
    "ünïcödé \\ 'mixed'",
]


@pytest.mark.parametrize("text", ["hello world", "", "ünïcode"])
def test_plain_text_is_unchanged(text):
    assert escape_backslash(text) == text
    assert escape_quotes(text) == text
    assert escape(text) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_backslash_round_trip(text):
    assert unescape(escape_backslash(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_escape_round_trip(text):
    assert unescape(escape(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_backslash_leaves_no_raw_specials(text):
    escaped = escape_backslash(text)
    for char in "\x00\n\r\x1a":
        assert char not in escaped


def test_backslash_keeps_tab_and_backspace():
    assert escape_backslash("\t\b") == "\t\b"


def test_escape_handles_tab_and_backspace():
    escaped = escape("\t\b")
    assert "\t" not in escaped
    assert "\b" not in escaped
    assert unescape(escaped) == "\t\b"


@pytest.mark.parametrize("text", SAMPLES)
def test_bytes_agree_with_str(text):
    assert escape_backslash(text.encode("utf-8")) == escape_backslash(text).encode("utf-8")
    assert escape_quotes(text.encode("utf-8")) == escape_quotes(text).encode("utf-8")


def test_bytearray_gives_bytes():
    result = escape_backslash(bytearray(b"a'b"))
    assert isinstance(result, bytes)
    assert result.replace(b"\\'", b"'") == b"a'b"


@pytest.mark.parametrize("text", SAMPLES)
def test_quotes_are_doubled(text):
    escaped = escape_quotes(text)
    assert escaped.count("'") == 2 * text.count("'")
    assert escaped.replace("''", "'") == text


def test_pinned_values():
    assert escape_quotes("it's") == "it''s"
    assert escape("a\tb") == "a\\tb"
    assert escape_backslash('say "hi"') == 'say \\"hi\\"'


@pytest.mark.parametrize("func", [escape_backslash, escape_quotes, escape])
def test_rejects_non_text(func):
    with pytest.raises(TypeError):
        func(42)


def test_escape_rejects_bytes():
    with pytest.raises(TypeError):
        escape(b"abc")