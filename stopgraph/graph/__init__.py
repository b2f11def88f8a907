"""In-memory triple store and the spatial operations built on it.

This subpackage turns stop records into facts, reads spatial entities
back from the store and extracts the subgraph inside a rectangle.
"""

from .bbox_filter import build_filtered_graph, extract_subgraph, filter_in_bounds
from .builder import build_spatial_entity, spatial_entity_facts, subject_for
from .spatial_view import extract_entity, list_spatial_entities, spatial_subjects
from .store import GraphStore

__all__ = [
    "GraphStore",
    "build_spatial_entity",
    "spatial_entity_facts",
    "subject_for",
    "extract_entity",
    "list_spatial_entities",
    "spatial_subjects",
    "filter_in_bounds",
    "extract_subgraph",
    "build_filtered_graph",
]
