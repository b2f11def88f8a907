"""Serialization port - Abstraction for RDF encoders.

Encoders consume a finished GraphStore through ``list_all_facts()`` and
``namespaces()``; they never mutate it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..graph.store import GraphStore


class GraphSerializerPort(Protocol):
    """Port for writing a graph in an RDF notation.

    Implementation: adapters/serialization/rdflib_serializer.py
    """

    def serialize(self, store: GraphStore, fmt: str = "turtle") -> str:
        """Encode the graph as text.

        Args:
            store: The graph to encode.
            fmt: Notation name ('turtle', 'xml' or 'nt').

        Returns:
            The encoded document.
        """
        ...

    def write(
        self, store: GraphStore, output_path: Path, fmt: Optional[str] = None
    ) -> Path:
        """Encode the graph into a file.

        Args:
            store: The graph to encode.
            output_path: Destination file; parent directories are created.
            fmt: Notation name; inferred from the extension when omitted.

        Returns:
            Path to the written file.
        """
        ...
