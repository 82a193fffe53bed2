import pytest

from arana.fields import (
    BINARY_CHARSET,
    Field,
    FieldFlag,
    FieldType,
    ScanType,
    get_default_field_length_and_decimal,
    get_default_field_length_and_decimal_for_cast,
    is_integer_type,
)

UTF8_CHARSET = 33


@pytest.mark.parametrize(
    "field_type, binary_name, text_name",
    [
        (FieldType.BLOB, "BLOB", "TEXT"),
        (FieldType.LONG_BLOB, "LONGBLOB", "LONGTEXT"),
        (FieldType.MEDIUM_BLOB, "MEDIUMBLOB", "MEDIUMTEXT"),
        (FieldType.TINY_BLOB, "TINYBLOB", "TINYTEXT"),
        (FieldType.STRING, "BINARY", "CHAR"),
        (FieldType.VARCHAR, "VARBINARY", "VARCHAR"),
        (FieldType.VAR_STRING, "VARBINARY", "VARCHAR"),
    ],
)
def test_type_name_depends_on_charset(field_type, binary_name, text_name):
    binary = Field(field_type=field_type, charset=BINARY_CHARSET)
    text = Field(field_type=field_type, charset=UTF8_CHARSET)
    assert binary.type_database_name() == binary_name
    assert text.type_database_name() == text_name


@pytest.mark.parametrize(
    "field_type, name",
    [
        (FieldType.INT24, "MEDIUMINT"),
        (FieldType.LONG, "INT"),
        (FieldType.LONGLONG, "BIGINT"),
        (FieldType.NEWDATE, "DATE"),
        (FieldType.NEWDECIMAL, "DECIMAL"),
        (FieldType.TINY, "TINYINT"),
        (FieldType.SHORT, "SMALLINT"),
        (FieldType.JSON, "JSON"),
    ],
)
def test_type_name_plain(field_type, name):
    assert Field(field_type=field_type).type_database_name() == name


def test_unknown_type_has_empty_name():
    assert Field(field_type=100).type_database_name() == ""
    assert Field(field_type=100).scan_type() is ScanType.UNKNOWN


def test_integer_scan_types():
    not_null = FieldFlag.NOT_NULL
    unsigned = FieldFlag.NOT_NULL | FieldFlag.UNSIGNED
    assert Field(field_type=FieldType.TINY, flags=not_null).scan_type() is ScanType.INT8
    assert Field(field_type=FieldType.TINY, flags=unsigned).scan_type() is ScanType.UINT8
    assert Field(field_type=FieldType.YEAR, flags=unsigned).scan_type() is ScanType.UINT16
    assert Field(field_type=FieldType.LONG, flags=not_null).scan_type() is ScanType.INT32
    assert (
        Field(field_type=FieldType.LONGLONG, flags=unsigned).scan_type() is ScanType.UINT64
    )


@pytest.mark.parametrize(
    "field_type",
    [FieldType.TINY, FieldType.SHORT, FieldType.INT24, FieldType.LONGLONG],
)
def test_nullable_integers_scan_as_null_int(field_type):
    assert Field(field_type=field_type).scan_type() is ScanType.NULL_INT


def test_float_and_double_scan_types():
    assert (
        Field(field_type=FieldType.FLOAT, flags=FieldFlag.NOT_NULL).scan_type()
        is ScanType.FLOAT32
    )
    assert Field(field_type=FieldType.FLOAT).scan_type() is ScanType.NULL_FLOAT
    # A double chooses by the unsigned flag, not the not-null flag.
    assert (
        Field(field_type=FieldType.DOUBLE, flags=FieldFlag.UNSIGNED).scan_type()
        is ScanType.FLOAT64
    )
    assert (
        Field(field_type=FieldType.DOUBLE, flags=FieldFlag.NOT_NULL).scan_type()
        is ScanType.NULL_FLOAT
    )


@pytest.mark.parametrize(
    "field_type",
    [FieldType.VARCHAR, FieldType.JSON, FieldType.TIME, FieldType.NEWDECIMAL],
)
def test_raw_bytes_scan_type(field_type):
    assert Field(field_type=field_type).scan_type() is ScanType.RAW_BYTES


@pytest.mark.parametrize(
    "field_type",
    [FieldType.DATE, FieldType.NEWDATE, FieldType.TIMESTAMP, FieldType.DATETIME],
)
def test_time_scan_type_is_always_nullable(field_type):
    field = Field(field_type=field_type, flags=FieldFlag.NOT_NULL)
    assert field.scan_type() is ScanType.NULL_TIME


def test_is_integer_type():
    integers = {
        FieldType.TINY,
        FieldType.SHORT,
        FieldType.INT24,
        FieldType.LONG,
        FieldType.LONGLONG,
    }
    for field_type in FieldType:
        assert is_integer_type(field_type) == (field_type in integers)


def test_default_length_and_decimal():
    assert get_default_field_length_and_decimal(FieldType.LONG) == (11, 0)
    assert get_default_field_length_and_decimal(FieldType.DOUBLE) == (22, -1)
    assert get_default_field_length_and_decimal(FieldType.GEOMETRY) == (-1, -1)


def test_default_length_and_decimal_for_cast():
    assert get_default_field_length_and_decimal_for_cast(FieldType.LONGLONG) == (22, 0)
    assert get_default_field_length_and_decimal_for_cast(FieldType.STRING) == (0, -1)
    assert get_default_field_length_and_decimal_for_cast(FieldType.TINY) == (-1, -1)


def test_wire_values_of_field_types():
    assert FieldType(0xFE) is FieldType.STRING
    assert FieldType(0xFC) is FieldType.BLOB