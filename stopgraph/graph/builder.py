"""Construction of spatial entities from stop records."""

from __future__ import annotations

from typing import List

from ..domain.models import IRI, Fact, LangLiteral, StopRecord, TypedLiteral
from ..domain.vocabulary import (
    EX_NS,
    GEO_LAT,
    GEO_LONG,
    GEO_SPATIAL_THING,
    LABEL_LANGUAGE,
    RDF_TYPE,
    RDFS_LABEL,
)
from .store import GraphStore


def subject_for(stop_id: str, base_iri: str = EX_NS) -> IRI:
    """Return the entity IRI for a stop identifier.

    The identifier is concatenated as-is, without escaping.
    """
    return IRI(base_iri + stop_id)


def spatial_entity_facts(record: StopRecord, base_iri: str = EX_NS) -> List[Fact]:
    """Build the facts describing one stop, in their canonical order.

    Raises:
        InvalidCoordinateError: If a coordinate is not an ``xsd:decimal``.
    """
    subject = subject_for(record.stop_id, base_iri)
    latitude = TypedLiteral.decimal(record.latitude)
    longitude = TypedLiteral.decimal(record.longitude)
    return [
        Fact(subject, RDF_TYPE, GEO_SPATIAL_THING),
        Fact(subject, RDFS_LABEL, LangLiteral(record.name, LABEL_LANGUAGE)),
        Fact(subject, GEO_LAT, latitude),
        Fact(subject, GEO_LONG, longitude),
    ]


def build_spatial_entity(
    record: StopRecord,
    store: GraphStore,
    base_iri: str = EX_NS,
) -> IRI:
    """Append the facts of one stop to ``store``.

    Either every fact of the record is appended or none is. Building the
    same identifier twice appends a second, overlapping fact set.

    Returns:
        The subject IRI of the entity.

    Raises:
        InvalidCoordinateError: If a coordinate is not an ``xsd:decimal``.
    """
    facts = spatial_entity_facts(record, base_iri)
    store.extend(facts)
    return facts[0].subject
