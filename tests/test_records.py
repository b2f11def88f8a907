import pytest

from stopgraph.domain.errors import (
    InvalidCoordinateError,
    MalformedRecordError,
    MissingRequiredFieldError,
    RecordError,
)
from stopgraph.io.records import parse_record


def test_parse_full_gtfs_row():
    record = parse_record("ST1,,Atocha,,40.5,-3.7,,,,,,")

    assert record.stop_id == "ST1"
    assert record.name == "Atocha"
    assert record.latitude == "40.5"
    assert record.longitude == "-3.7"


def test_parse_trims_every_field():
    record = parse_record(" ST4 ,x,  Toledo  ,desc, 39.8619 , -4.01135 ")

    assert record.stop_id == "ST4"
    assert record.name == "Toledo"
    assert record.latitude == "39.8619"
    assert record.longitude == "-4.01135"


def test_exactly_six_fields_is_enough():
    record = parse_record("A,,B,,1,2")
    assert record.stop_id == "A"


@pytest.mark.parametrize("line", ["ST,,only,four", "a,b,c,d,e", ""])
def test_too_few_fields_is_malformed(line):
    with pytest.raises(MalformedRecordError) as excinfo:
        parse_record(line)
    assert excinfo.value.field_count == len(line.split(","))


@pytest.mark.parametrize(
    "line, field_name",
    [
        (",,Name,,40.0,-3.0", "stop_id"),
        ("ID,,   ,,40.0,-3.0", "stop_name"),
        ("ID,,Name,,,-3.0", "stop_lat"),
        ("ID,,Name,,40.0,  ", "stop_lon"),
    ],
)
def test_empty_required_field(line, field_name):
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        parse_record(line)
    assert excinfo.value.field_name == field_name


@pytest.mark.parametrize(
    "lat, lon",
    [
        ("north", "-3.5"),
        ("40.0", "3.5.1"),
        ("nan", "1"),
        ("40", "inf"),
        ("\u0664\u0660.\u0665", "-3.5"),
    ],
)
def test_unparseable_coordinates(lat, lon):
    with pytest.raises(InvalidCoordinateError):
        parse_record(f"ID,,Name,,{lat},{lon}")


def test_record_errors_share_a_base():
    with pytest.raises(RecordError):
        parse_record("too,few")


def test_quoted_comma_shifts_columns():
    # No quoting support: the comma inside the name moves every later column.
    with pytest.raises(InvalidCoordinateError):
        parse_record('ID,,"Madrid, Atocha",desc,40.4,-3.6')


def test_comma_in_name_can_misparse_silently():
    record = parse_record("ID,,Madrid, Atocha,1.0,2.0,3.0")
    assert record.name == "Madrid"
    assert (record.latitude, record.longitude) == ("1.0", "2.0")


def test_custom_delimiter():
    record = parse_record("ID;;Name;;1.5;2.5", delimiter=";")
    assert (record.latitude, record.longitude) == ("1.5", "2.5")
