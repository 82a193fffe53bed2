# arana

Pure-Python helpers for the values that travel over the MySQL client/server
protocol. The package has no third-party dependencies.

## Modules

- `arana.encoding`: little-endian integers (`encode_uint16`, `encode_uint32`,
  `encode_uint64`, `read_uint16`, `read_uint32`, `read_uint64`),
  length-encoded integers and strings (`encode_len_enc_int`,
  `encode_len_enc_string`, `read_len_enc_int`, `read_len_enc_string`,
  `read_len_enc_bytes`, `skip_len_enc_string`) and null-terminated strings
  (`encode_null_string`, `read_null_string`). Readers take a buffer and a
  position and return `(value, next_pos)`; they raise `DecodeError` (a
  `ValueError`) when the buffer is too short. The row-level helpers
  `read_length_encoded_integer`, `read_length_encoded_string` and
  `skip_length_encoded_string` read from the start of a buffer and treat the
  `0xfb` marker as NULL.
- `arana.fields`: column metadata. `Field` describes a column; `FieldType`,
  `FieldFlag` and `ScanType` are enums. `Field.type_database_name()` gives the
  SQL type name (telling `BLOB` from `TEXT` by charset) and
  `Field.scan_type()` the kind of value the column scans into.
  `is_integer_type`, `get_default_field_length_and_decimal` and
  `get_default_field_length_and_decimal_for_cast` give type defaults, with
  `(-1, -1)` for unknown types.
- `arana.datetimes`: `parse_date_time` reads `YYYY-MM-DD[ HH:MM:SS[.ffffff]]`
  text, `parse_binary_date_time` reads binary-protocol dates,
  `format_date_time` writes a `datetime` as MySQL text, and
  `format_binary_date_time` / `format_binary_time` turn binary-protocol
  values into text of a given length. Zero dates read as `ZERO_DATETIME`.
- `arana.escaping`: `escape_backslash` escapes with backslashes,
  `escape_quotes` doubles apostrophes (for `NO_BACKSLASH_ESCAPES`), and
  `escape` also escapes backspace and tab. The first two accept `str` or
  bytes-like input and return the same kind.
- `arana.convert`: `read_bool` parses `1/0/true/false` words,
  `uint64_to_string` gives decimal ASCII bytes, `as_string` gives the text
  form of a driver value, `map_isolation_level` maps an `IsolationLevel` to
  its SQL name, and `random_buf` makes printable-ASCII salt bytes.

## Installing

```
pip install .
```

## Examples

```python
from arana.encoding import encode_len_enc_int, read_len_enc_int

data = encode_len_enc_int(1 << 16)      # b"\xfd\x00\x00\x01"
value, pos = read_len_enc_int(data, 0)  # (65536, 4)
```

```python
from arana.datetimes import format_binary_date_time, parse_date_time

parse_date_time(b"2021-03-04 05:06:07")                 # datetime(2021, 3, 4, 5, 6, 7)
format_binary_date_time((2020).to_bytes(2, "little") + bytes([1, 2]), 10)  # b"2020-01-02"
```

```python
from arana.fields import Field, FieldFlag, FieldType

column = Field(name="id", field_type=FieldType.LONG,
               flags=FieldFlag.NOT_NULL | FieldFlag.UNSIGNED)
column.type_database_name()  # "INT"
column.scan_type()           # ScanType.UINT32
```

```python
from arana.escaping import escape_backslash, escape_quotes

escape_backslash("it's")  # "it\\'s"
escape_quotes("it's")     # "it''s"
```

## What it does not do

The package works on values and buffers only. It does not open sockets,
frame or sequence packets, parse OK/EOF/error packets, decode whole result
rows, or run a server or proxy; there is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```