"""Column descriptions of MySQL result sets and their type metadata."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

# Character set id of the binary collation.
BINARY_CHARSET = 63


class FieldType(enum.IntEnum):
    """Column types as sent on the wire."""

    DECIMAL = 0
    TINY = 1
    SHORT = 2
    LONG = 3
    FLOAT = 4
    DOUBLE = 5
    NULL = 6
    TIMESTAMP = 7
    LONGLONG = 8
    INT24 = 9
    DATE = 10
    TIME = 11
    DATETIME = 12
    YEAR = 13
    NEWDATE = 14
    VARCHAR = 15
    BIT = 16
    JSON = 245
    NEWDECIMAL = 246
    ENUM = 247
    SET = 248
    TINY_BLOB = 249
    MEDIUM_BLOB = 250
    LONG_BLOB = 251
    BLOB = 252
    VAR_STRING = 253
    STRING = 254
    GEOMETRY = 255


class FieldFlag(enum.IntFlag):
    """Column definition flags."""

    NOT_NULL = 1
    PRI_KEY = 2
    UNIQUE_KEY = 4
    MULTIPLE_KEY = 8
    BLOB = 16
    UNSIGNED = 32
    ZEROFILL = 64
    BINARY = 128
    ENUM = 256
    AUTO_INCREMENT = 512
    TIMESTAMP = 1024
    SET = 2048
    NO_DEFAULT_VALUE = 4096
    ON_UPDATE_NOW = 8192
    NUM = 32768


class ScanType(enum.Enum):
    """The kind of value a column is best scanned into."""

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    NULL_FLOAT = "null_float"
    NULL_INT = "null_int"
    NULL_TIME = "null_time"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    RAW_BYTES = "raw_bytes"
    UNKNOWN = "unknown"


_PLAIN_NAMES = {
    FieldType.BIT: "BIT",
    FieldType.DATE: "DATE",
    FieldType.DATETIME: "DATETIME",
    FieldType.DECIMAL: "DECIMAL",
    FieldType.DOUBLE: "DOUBLE",
    FieldType.ENUM: "ENUM",
    FieldType.FLOAT: "FLOAT",
    FieldType.GEOMETRY: "GEOMETRY",
    FieldType.INT24: "MEDIUMINT",
    FieldType.JSON: "JSON",
    FieldType.LONG: "INT",
    FieldType.LONGLONG: "BIGINT",
    FieldType.NEWDATE: "DATE",
    FieldType.NEWDECIMAL: "DECIMAL",
    FieldType.NULL: "NULL",
    FieldType.SET: "SET",
    FieldType.SHORT: "SMALLINT",
    FieldType.TIME: "TIME",
    FieldType.TIMESTAMP: "TIMESTAMP",
    FieldType.TINY: "TINYINT",
    FieldType.YEAR: "YEAR",
}

# (name for binary charset, name for any other charset)
_CHARSET_NAMES = {
    FieldType.BLOB: ("BLOB", "TEXT"),
    FieldType.LONG_BLOB: ("LONGBLOB", "LONGTEXT"),
    FieldType.MEDIUM_BLOB: ("MEDIUMBLOB", "MEDIUMTEXT"),
    FieldType.TINY_BLOB: ("TINYBLOB", "TINYTEXT"),
    FieldType.STRING: ("BINARY", "CHAR"),
    FieldType.VARCHAR: ("VARBINARY", "VARCHAR"),
    FieldType.VAR_STRING: ("VARBINARY", "VARCHAR"),
}

# (unsigned, signed) scan types of non-null integer columns
_INTEGER_SCAN_TYPES = {
    FieldType.TINY: (ScanType.UINT8, ScanType.INT8),
    FieldType.SHORT: (ScanType.UINT16, ScanType.INT16),
    FieldType.YEAR: (ScanType.UINT16, ScanType.INT16),
    FieldType.INT24: (ScanType.UINT32, ScanType.INT32),
    FieldType.LONG: (ScanType.UINT32, ScanType.INT32),
    FieldType.LONGLONG: (ScanType.UINT64, ScanType.INT64),
}

_RAW_BYTES_TYPES = frozenset(
    {
        FieldType.DECIMAL,
        FieldType.NEWDECIMAL,
        FieldType.VARCHAR,
        FieldType.BIT,
        FieldType.ENUM,
        FieldType.SET,
        FieldType.TINY_BLOB,
        FieldType.MEDIUM_BLOB,
        FieldType.LONG_BLOB,
        FieldType.BLOB,
        FieldType.VAR_STRING,
        FieldType.STRING,
        FieldType.GEOMETRY,
        FieldType.JSON,
        FieldType.TIME,
    }
)

_TIME_TYPES = frozenset(
    {FieldType.DATE, FieldType.NEWDATE, FieldType.TIMESTAMP, FieldType.DATETIME}
)


@dataclass
class Field:
    """Definition of one column of a result set."""

    name: str = ""
    field_type: int = FieldType.NULL
    table: str = ""
    org_table: str = ""
    database: str = ""
    org_name: str = ""
    length: int = 0
    flags: int = 0
    decimals: int = 0
    charset: int = 0
    column_length: int = 0
    default_value_length: int = 0
    default_value: Optional[bytes] = None

    def type_database_name(self) -> str:
        """SQL name of the column type, or an empty string if unknown."""
        names = _CHARSET_NAMES.get(self.field_type)
        if names is not None:
            binary, text = names
            return binary if self.charset == BINARY_CHARSET else text
        return _PLAIN_NAMES.get(self.field_type, "")

    def scan_type(self) -> ScanType:
        """The kind of value this column is best scanned into."""
        not_null = bool(self.flags & FieldFlag.NOT_NULL)
        unsigned = bool(self.flags & FieldFlag.UNSIGNED)
        kind = self.field_type

        integer = _INTEGER_SCAN_TYPES.get(kind)
        if integer is not None:
            if not not_null:
                return ScanType.NULL_INT
            return integer[0] if unsigned else integer[1]
        if kind == FieldType.FLOAT:
            return ScanType.FLOAT32 if not_null else ScanType.NULL_FLOAT
        if kind == FieldType.DOUBLE:
            return ScanType.FLOAT64 if unsigned else ScanType.NULL_FLOAT
        if kind in _RAW_BYTES_TYPES:
            return ScanType.RAW_BYTES
        if kind in _TIME_TYPES:
            # A nullable time is returned either way, for consistent behaviour.
            return ScanType.NULL_TIME
        return ScanType.UNKNOWN


_INTEGER_TYPES = frozenset(
    {
        FieldType.TINY,
        FieldType.SHORT,
        FieldType.INT24,
        FieldType.LONG,
        FieldType.LONGLONG,
    }
)

_DEFAULT_LENGTH_AND_DECIMAL = {
    FieldType.BIT: (1, 0),
    FieldType.TINY: (4, 0),
    FieldType.SHORT: (6, 0),
    FieldType.INT24: (9, 0),
    FieldType.LONG: (11, 0),
    FieldType.LONGLONG: (20, 0),
    FieldType.DOUBLE: (22, -1),
    FieldType.FLOAT: (12, -1),
    FieldType.NEWDECIMAL: (11, 0),
    FieldType.TIME: (10, 0),
    FieldType.DATE: (10, 0),
    FieldType.TIMESTAMP: (19, 0),
    FieldType.DATETIME: (19, 0),
    FieldType.YEAR: (4, 0),
    FieldType.STRING: (1, 0),
    FieldType.VARCHAR: (5, 0),
    FieldType.VAR_STRING: (5, 0),
    FieldType.TINY_BLOB: (255, 0),
    FieldType.BLOB: (65535, 0),
    FieldType.MEDIUM_BLOB: (16777215, 0),
    FieldType.LONG_BLOB: (4294967295, 0),
    FieldType.JSON: (4294967295, 0),
    FieldType.NULL: (0, 0),
    FieldType.SET: (-1, 0),
    FieldType.ENUM: (-1, 0),
}

_DEFAULT_LENGTH_AND_DECIMAL_FOR_CAST = {
    FieldType.STRING: (0, -1),
    FieldType.DATE: (10, 0),
    FieldType.DATETIME: (19, 0),
    FieldType.NEWDECIMAL: (11, 0),
    FieldType.TIME: (10, 0),
    FieldType.LONGLONG: (22, 0),
    FieldType.JSON: (4194304, 0),
}


def is_integer_type(field_type: int) -> bool:
    """Tell whether ``field_type`` is one of the integer column types."""
    return field_type in _INTEGER_TYPES


def get_default_field_length_and_decimal(field_type: int) -> tuple[int, int]:
    """Default display length and decimals of a column; ``(-1, -1)`` if unknown."""
    return _DEFAULT_LENGTH_AND_DECIMAL.get(field_type, (-1, -1))


def get_default_field_length_and_decimal_for_cast(field_type: int) -> tuple[int, int]:
    """Default display length and decimals of a cast column; ``(-1, -1)`` if unknown."""
    return _DEFAULT_LENGTH_AND_DECIMAL_FOR_CAST.get(field_type, (-1, -1))