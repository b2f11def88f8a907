"""Domain layer - Core models, vocabulary and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .areas import DEFAULT_AREA, PRESET_AREAS, get_area
from .errors import (
    ConfigurationError,
    InvalidCoordinateError,
    MalformedRecordError,
    MissingCoordinateError,
    MissingRequiredFieldError,
    RecordError,
    RenderingError,
    SerializationError,
    SourceReadError,
    StopGraphError,
)
from .models import (
    IRI,
    Fact,
    FilterResult,
    GeographicBounds,
    IngestReport,
    LangLiteral,
    Literal,
    Node,
    PlainLiteral,
    RecordFailure,
    SkippedSubject,
    SpatialEntity,
    SpatialListing,
    StopRecord,
    TypedLiteral,
)

__all__ = [
    # Models
    "IRI",
    "PlainLiteral",
    "LangLiteral",
    "TypedLiteral",
    "Literal",
    "Node",
    "Fact",
    "StopRecord",
    "GeographicBounds",
    "SpatialEntity",
    "SkippedSubject",
    "SpatialListing",
    "FilterResult",
    "RecordFailure",
    "IngestReport",
    # Areas
    "PRESET_AREAS",
    "DEFAULT_AREA",
    "get_area",
    # Errors
    "StopGraphError",
    "RecordError",
    "MalformedRecordError",
    "MissingRequiredFieldError",
    "InvalidCoordinateError",
    "MissingCoordinateError",
    "SourceReadError",
    "SerializationError",
    "RenderingError",
    "ConfigurationError",
]
