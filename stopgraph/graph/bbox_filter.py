"""Bounding-box filtering and closed subgraph extraction.

Filtering runs in two phases. Membership is decided from the coordinates
alone, through the spatial view. The copy then takes every fact of each
retained subject, so facts other than the reserved ones travel with it.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..domain.models import IRI, FilterResult, GeographicBounds, SpatialEntity
from .spatial_view import list_spatial_entities
from .store import GraphStore

logger = logging.getLogger(__name__)


def filter_in_bounds(store: GraphStore, bounds: GeographicBounds) -> FilterResult:
    """Select the spatial entities of ``store`` lying inside ``bounds``.

    Entities keep the store's enumeration order. Subjects the spatial view
    skips still count as examined.
    """
    logger.debug("Filtering spatial entities", extra={"bounds": str(bounds)})

    listing = list_spatial_entities(store)
    retained: List[SpatialEntity] = [
        entity for entity in listing.entities if entity.is_within(bounds)
    ]
    result = FilterResult(
        bounds=bounds,
        entities=tuple(retained),
        examined=listing.examined,
        retained=len(retained),
    )

    logger.info(
        "Filter completed",
        extra={
            "area": bounds.name,
            "examined": result.examined,
            "retained": result.retained,
            "skipped": len(listing.skipped),
            "percentage": round(result.percentage, 1),
        },
    )
    return result


def extract_subgraph(store: GraphStore, subjects: Iterable[IRI]) -> GraphStore:
    """Copy every fact of each subject into a new store.

    Fact order is preserved within a subject, subject order follows
    ``subjects``. The new store carries a copy of the source prefixes.
    """
    subgraph = GraphStore.with_prefixes_of(store)
    for subject in subjects:
        subgraph.extend(store.facts_for(subject))
    return subgraph


def build_filtered_graph(store: GraphStore, bounds: GeographicBounds) -> GraphStore:
    """Return the closed subgraph of the entities inside ``bounds``."""
    result = filter_in_bounds(store, bounds)
    filtered = extract_subgraph(store, result.subjects)
    logger.info(
        "Filtered graph created",
        extra={"area": bounds.name, "facts": filtered.size()},
    )
    return filtered
