"""Parsing of individual lines of a GTFS ``stops.txt`` table.

Only four columns matter::

    stop_id,stop_code,stop_name,stop_desc,stop_lat,stop_lon,...
       0                 2                   4        5

Lines are split on a single delimiter character without any quoting
support, so a name containing the delimiter shifts the columns and the
line is misparsed.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..domain.errors import (
    InvalidCoordinateError,
    MalformedRecordError,
    MissingRequiredFieldError,
)
from ..domain.models import StopRecord

MIN_FIELDS = 6

ID_COLUMN = 0
NAME_COLUMN = 2
LAT_COLUMN = 4
LON_COLUMN = 5

_REQUIRED = (
    ("stop_id", ID_COLUMN),
    ("stop_name", NAME_COLUMN),
    ("stop_lat", LAT_COLUMN),
    ("stop_lon", LON_COLUMN),
)


def parse_record(line: str, delimiter: str = ",") -> StopRecord:
    """Turn one stops line into a validated record.

    Parameters
    ----------
    line:
        Raw text line, without the trailing newline. Blank lines are not
        records and must be skipped by the caller.
    delimiter:
        Field separator.

    Returns
    -------
    StopRecord
        Identifier, name and coordinate texts, each trimmed.

    Raises
    ------
    MalformedRecordError
        If the line has fewer than six fields.
    MissingRequiredFieldError
        If the identifier, name, latitude or longitude is empty.
    InvalidCoordinateError
        If a coordinate is not a finite decimal number.
    """
    fields = line.split(delimiter)
    if len(fields) < MIN_FIELDS:
        raise MalformedRecordError(
            f"Expected at least {MIN_FIELDS} fields, got {len(fields)}",
            field_count=len(fields),
        )

    values = {}
    for name, column in _REQUIRED:
        value = fields[column].strip()
        if not value:
            raise MissingRequiredFieldError(
                f"Empty required field {name}",
                field_name=name,
            )
        values[name] = value

    for name in ("stop_lat", "stop_lon"):
        _check_number(values[name])

    return StopRecord(
        stop_id=values["stop_id"],
        name=values["stop_name"],
        latitude=values["stop_lat"],
        longitude=values["stop_lon"],
    )


def _check_number(text: str) -> None:
    # Decimal also accepts non-ASCII digits.
    if not text.isascii():
        raise InvalidCoordinateError(
            f"Coordinate is not a number: {text!r}",
            value=text,
        )
    try:
        number = Decimal(text)
    except InvalidOperation as e:
        raise InvalidCoordinateError(
            f"Coordinate is not a number: {text!r}",
            value=text,
            cause=e,
        )
    if not number.is_finite():
        raise InvalidCoordinateError(
            f"Coordinate is not finite: {text!r}",
            value=text,
        )
