"""Read-only projection of spatial entities out of a graph store.

Entities are found through the ``rdf:type geo:SpatialThing`` marker and
rebuilt by walking each subject's facts; no query layer is involved.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.errors import (
    InvalidCoordinateError,
    MissingCoordinateError,
    StopGraphError,
)
from ..domain.models import (
    IRI,
    LangLiteral,
    Node,
    PlainLiteral,
    SkippedSubject,
    SpatialEntity,
    SpatialListing,
    TypedLiteral,
)
from ..domain.vocabulary import (
    GEO_LAT,
    GEO_LONG,
    GEO_SPATIAL_THING,
    RDF_TYPE,
    RDFS_LABEL,
    UNNAMED_LABEL,
)
from .store import GraphStore

logger = logging.getLogger(__name__)


def _first_object(store: GraphStore, subject: IRI, predicate: IRI) -> Optional[Node]:
    return next(store.objects_for(subject, predicate), None)


def _label_of(store: GraphStore, subject: IRI) -> str:
    node = _first_object(store, subject, RDFS_LABEL)
    if isinstance(node, (LangLiteral, PlainLiteral)):
        return node.text
    if isinstance(node, TypedLiteral):
        return node.lexical
    return UNNAMED_LABEL


def _coordinate_of(store: GraphStore, subject: IRI, predicate: IRI) -> float:
    node = _first_object(store, subject, predicate)
    if node is None:
        raise MissingCoordinateError(
            f"Missing {predicate.local_name} on {subject}",
            subject=subject.value,
            predicate=predicate.value,
        )
    if not isinstance(node, TypedLiteral):
        raise InvalidCoordinateError(
            f"{predicate.local_name} on {subject} is not a typed literal",
            value=str(node),
        )
    return node.to_float()


def extract_entity(store: GraphStore, subject: IRI) -> SpatialEntity:
    """Rebuild the entity described by ``subject``.

    A missing label is replaced by a placeholder; coordinates are mandatory.

    Raises:
        MissingCoordinateError: If ``geo:lat`` or ``geo:long`` is absent.
        InvalidCoordinateError: If a coordinate is not a numeric literal.
    """
    name = _label_of(store, subject)
    latitude = _coordinate_of(store, subject, GEO_LAT)
    longitude = _coordinate_of(store, subject, GEO_LONG)
    return SpatialEntity(
        subject=subject,
        name=name,
        latitude=latitude,
        longitude=longitude,
    )


def spatial_subjects(store: GraphStore) -> List[IRI]:
    """Return every subject tagged as a spatial thing."""
    return store.subjects_with(RDF_TYPE, GEO_SPATIAL_THING)


def list_spatial_entities(store: GraphStore) -> SpatialListing:
    """Rebuild every spatial entity of ``store``.

    Subjects whose extraction fails are logged and reported in
    ``SpatialListing.skipped``; they never stop the enumeration.
    """
    entities: List[SpatialEntity] = []
    skipped: List[SkippedSubject] = []

    for subject in spatial_subjects(store):
        try:
            entities.append(extract_entity(store, subject))
        except StopGraphError as e:
            logger.warning(
                "Skipping spatial entity",
                extra={"subject": subject.value, "error": str(e)},
            )
            skipped.append(SkippedSubject(subject=subject, reason=str(e)))

    return SpatialListing(entities=tuple(entities), skipped=tuple(skipped))
