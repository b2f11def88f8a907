"""Typed domain errors for the stop graph.

Record-level errors are raised while turning a stops line into facts and
are caught by the ingestion loop; extraction errors are raised while
reading entities back from the store and are caught by the spatial view.

All errors inherit from StopGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StopGraphError(Exception):
    """Base error for the stop graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class RecordError(StopGraphError):
    """A stops line could not be turned into a spatial entity."""


@dataclass
class MalformedRecordError(RecordError):
    """The line has fewer fields than the stops layout requires.

    Attributes:
        field_count: Number of fields found after splitting
    """

    field_count: int = 0


@dataclass
class MissingRequiredFieldError(RecordError):
    """A mandatory field is empty after trimming.

    Attributes:
        field_name: Name of the empty column (e.g. 'stop_name')
    """

    field_name: str = ""


@dataclass
class InvalidCoordinateError(RecordError):
    """A coordinate is not a usable decimal number.

    Attributes:
        value: The offending text
    """

    value: str = ""


@dataclass
class MissingCoordinateError(StopGraphError):
    """An entity lacks a coordinate fact at read time.

    Attributes:
        subject: IRI of the entity
        predicate: IRI of the missing coordinate predicate
    """

    subject: str = ""
    predicate: str = ""


@dataclass
class SourceReadError(StopGraphError):
    """The stops source could not be read.

    Attributes:
        file_path: Path of the source file
    """

    file_path: Optional[str] = None


@dataclass
class SerializationError(StopGraphError):
    """Writing a graph in an RDF notation failed.

    Attributes:
        output_path: Destination path if relevant
        fmt: Requested notation
    """

    output_path: Optional[str] = None
    fmt: str = ""


@dataclass
class RenderingError(StopGraphError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(StopGraphError):
    """Invalid or unknown configuration value.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
