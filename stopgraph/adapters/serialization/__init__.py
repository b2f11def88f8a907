"""Serialization adapters - Implementations of GraphSerializerPort.

Available implementations:
- RdflibGraphSerializer: Turtle, RDF/XML and N-Triples through rdflib
"""

from .rdflib_serializer import RdflibGraphSerializer, format_for_path

__all__ = ["RdflibGraphSerializer", "format_for_path"]
