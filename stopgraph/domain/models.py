"""Immutable domain models for the stop graph.

All models are frozen dataclasses with slots. Graph terms (IRIs and the
three literal variants) are hashable so they can key the store indexes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import InvalidCoordinateError

XSD_NS = "http://www.w3.org/2001/XMLSchema#"
XSD_DECIMAL = XSD_NS + "decimal"

NUMERIC_DATATYPES = frozenset(
    {
        XSD_DECIMAL,
        XSD_NS + "double",
        XSD_NS + "float",
        XSD_NS + "integer",
    }
)

_DECIMAL_LEXICAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True, slots=True)
class IRI:
    """An absolute resource identifier."""

    value: str

    @property
    def local_name(self) -> str:
        """Return the part after the last '#' or '/'."""
        cut = max(self.value.rfind("#"), self.value.rfind("/"))
        return self.value[cut + 1 :]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PlainLiteral:
    """A string literal without language or datatype."""

    text: str

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True, slots=True)
class LangLiteral:
    """A string literal carrying a language tag."""

    text: str
    language: str

    def __str__(self) -> str:
        return f'"{self.text}"@{self.language}'


@dataclass(frozen=True, slots=True)
class TypedLiteral:
    """A literal with an explicit datatype.

    The lexical form is kept verbatim so numeric values keep every digit
    they were written with.
    """

    lexical: str
    datatype: str

    @classmethod
    def decimal(cls, text: str) -> TypedLiteral:
        """Build an ``xsd:decimal`` literal.

        Raises:
            InvalidCoordinateError: If ``text`` is outside the decimal
                lexical space (exponents, NaN and infinities included).
        """
        lexical = text.strip()
        if not _DECIMAL_LEXICAL.fullmatch(lexical):
            raise InvalidCoordinateError(
                f"Not an xsd:decimal value: {text!r}",
                value=text,
            )
        return cls(lexical=lexical, datatype=XSD_DECIMAL)

    @property
    def is_numeric(self) -> bool:
        return self.datatype in NUMERIC_DATATYPES

    def to_float(self) -> float:
        """Return the numeric value of the literal.

        Raises:
            InvalidCoordinateError: If the literal is not numeric.
        """
        if not self.is_numeric:
            raise InvalidCoordinateError(
                f"Literal of type {self.datatype} is not numeric",
                value=self.lexical,
            )
        try:
            return float(self.lexical)
        except ValueError as e:
            raise InvalidCoordinateError(
                f"Unparseable numeric literal {self.lexical!r}",
                value=self.lexical,
                cause=e,
            )

    def __str__(self) -> str:
        return f'"{self.lexical}"^^{self.datatype}'


Literal = Union[PlainLiteral, LangLiteral, TypedLiteral]
Node = Union[IRI, PlainLiteral, LangLiteral, TypedLiteral]


@dataclass(frozen=True, slots=True)
class Fact:
    """One subject/predicate/object assertion."""

    subject: IRI
    predicate: IRI
    object: Node


@dataclass(frozen=True, slots=True)
class StopRecord:
    """A validated row of the stops table.

    Attributes:
        stop_id: Raw stop identifier (column 0)
        name: Stop name (column 2)
        latitude: Trimmed latitude text (column 4)
        longitude: Trimmed longitude text (column 5)
    """

    stop_id: str
    name: str
    latitude: str
    longitude: str


@dataclass(frozen=True, slots=True)
class GeographicBounds:
    """A closed latitude/longitude rectangle.

    Attributes:
        min_lat: Southern edge
        max_lat: Northern edge
        min_lon: Western edge
        max_lon: Eastern edge
        name: Display name of the area
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    name: str = ""

    def contains(self, lat: float, lon: float) -> bool:
        """Check membership; every edge belongs to the rectangle."""
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lon <= lon <= self.max_lon
        )

    def __str__(self) -> str:
        label = self.name or "Area"
        return (
            f"{label} [lat: {self.min_lat:.3f}-{self.max_lat:.3f}, "
            f"lon: {self.min_lon:.3f}-{self.max_lon:.3f}]"
        )


@dataclass(frozen=True, slots=True)
class SpatialEntity:
    """A stop read back from the graph.

    Attributes:
        subject: IRI of the entity
        name: Label, or a placeholder when the entity has none
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
    """

    subject: IRI
    name: str
    latitude: float
    longitude: float

    @property
    def local_name(self) -> str:
        return self.subject.local_name

    def is_within(self, bounds: GeographicBounds) -> bool:
        return bounds.contains(self.latitude, self.longitude)

    def __str__(self) -> str:
        return (
            f"{self.name:<40} ({self.latitude:.4f}, {self.longitude:.4f}) "
            f"[{self.local_name}]"
        )


@dataclass(frozen=True, slots=True)
class SkippedSubject:
    """A marker subject the spatial view could not turn into an entity."""

    subject: IRI
    reason: str


@dataclass(frozen=True, slots=True)
class SpatialListing:
    """Entities reconstructed from a store, plus the subjects skipped."""

    entities: tuple[SpatialEntity, ...] = field(default_factory=tuple)
    skipped: tuple[SkippedSubject, ...] = field(default_factory=tuple)

    @property
    def examined(self) -> int:
        return len(self.entities) + len(self.skipped)


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of a bounding-box filter.

    Attributes:
        bounds: Rectangle used for the filter
        entities: Retained entities in enumeration order
        examined: Number of marker subjects enumerated
        retained: Number of entities inside the bounds
    """

    bounds: GeographicBounds
    entities: tuple[SpatialEntity, ...] = field(default_factory=tuple)
    examined: int = 0
    retained: int = 0

    @property
    def is_empty(self) -> bool:
        return self.retained == 0

    @property
    def percentage(self) -> float:
        """Share of examined entities that were retained, in percent."""
        if self.examined == 0:
            return 0.0
        return self.retained * 100.0 / self.examined

    @property
    def subjects(self) -> tuple[IRI, ...]:
        return tuple(entity.subject for entity in self.entities)


@dataclass(frozen=True, slots=True)
class RecordFailure:
    """A stops line rejected during ingestion.

    Attributes:
        line_number: 1-based data line number (header excluded)
        content: The raw line
        reason: Error message
    """

    line_number: int
    content: str
    reason: str


@dataclass(frozen=True, slots=True)
class IngestReport:
    """Summary of an ingestion run.

    Attributes:
        processed: Lines turned into entities
        lines_read: Data lines read, blank ones included
        failures: Rejected lines in input order
        header: The discarded header line, if any
    """

    processed: int = 0
    lines_read: int = 0
    failures: tuple[RecordFailure, ...] = field(default_factory=tuple)
    header: Optional[str] = None

    @property
    def failed(self) -> int:
        return len(self.failures)
