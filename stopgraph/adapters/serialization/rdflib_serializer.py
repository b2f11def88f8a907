"""rdflib serializer adapter.

Converts a GraphStore into an ``rdflib.Graph`` and lets rdflib write
Turtle, abbreviated RDF/XML or N-Triples.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from rdflib import Graph, Namespace, URIRef
from rdflib import Literal as RdfLiteral
from rdflib.term import Node as RdfNode

from ...domain.errors import ConfigurationError, SerializationError
from ...domain.models import IRI, LangLiteral, Node, PlainLiteral, TypedLiteral
from ...graph.store import GraphStore

# notation name -> rdflib plugin name
FORMATS: Dict[str, str] = {
    "turtle": "turtle",
    "xml": "pretty-xml",
    "nt": "nt",
}

EXTENSIONS: Dict[str, str] = {
    "turtle": ".ttl",
    "xml": ".rdf",
    "nt": ".nt",
}


def to_rdflib_node(node: Node) -> RdfNode:
    """Map one graph term to its rdflib counterpart."""
    if isinstance(node, IRI):
        return URIRef(node.value)
    if isinstance(node, LangLiteral):
        return RdfLiteral(node.text, lang=node.language)
    if isinstance(node, TypedLiteral):
        return RdfLiteral(node.lexical, datatype=URIRef(node.datatype))
    if isinstance(node, PlainLiteral):
        return RdfLiteral(node.text)
    raise TypeError(f"Unsupported graph term: {node!r}")


def format_for_path(path: Path) -> str:
    """Guess the notation from a file extension, defaulting to Turtle."""
    suffix = path.suffix.lower()
    for fmt, extension in EXTENSIONS.items():
        if suffix == extension:
            return fmt
    return "turtle"


@dataclass
class RdflibGraphSerializer:
    """Graph serializer backed by rdflib.

    This adapter implements GraphSerializerPort. Every prefix bound on
    the store is bound on the rdflib graph, replacing rdflib's defaults.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def to_rdflib(self, store: GraphStore) -> Graph:
        graph = Graph()
        for prefix, namespace in store.namespaces().items():
            graph.bind(prefix, Namespace(namespace), override=True, replace=True)
        for fact in store.list_all_facts():
            graph.add(
                (
                    URIRef(fact.subject.value),
                    URIRef(fact.predicate.value),
                    to_rdflib_node(fact.object),
                )
            )
        return graph

    def serialize(self, store: GraphStore, fmt: str = "turtle") -> str:
        """Encode the graph as text.

        Raises:
            ConfigurationError: If ``fmt`` is not a supported notation.
            SerializationError: If rdflib fails to encode the graph.
        """
        plugin = self._plugin_for(fmt)
        try:
            return self.to_rdflib(store).serialize(format=plugin)
        except Exception as e:
            raise SerializationError(
                f"Failed to encode graph as {fmt}",
                fmt=fmt,
                cause=e,
            )

    def write(
        self, store: GraphStore, output_path: Path, fmt: Optional[str] = None
    ) -> Path:
        """Encode the graph into ``output_path``.

        Without ``fmt`` the notation follows the file extension.

        Raises:
            ConfigurationError: If ``fmt`` is not a supported notation.
            SerializationError: If encoding or writing fails.
        """
        fmt = fmt or format_for_path(output_path)
        document = self.serialize(store, fmt)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise SerializationError(
                f"Failed to write {output_path}",
                output_path=str(output_path),
                fmt=fmt,
                cause=e,
            )

        self._logger.info(
            "Graph exported",
            extra={"output_path": str(output_path), "fmt": fmt, "facts": store.size()},
        )
        return output_path

    @staticmethod
    def _plugin_for(fmt: str) -> str:
        try:
            return FORMATS[fmt]
        except KeyError:
            raise ConfigurationError(
                f"Unsupported notation {fmt!r}; expected one of {', '.join(FORMATS)}",
                setting_name="fmt",
            ) from None
