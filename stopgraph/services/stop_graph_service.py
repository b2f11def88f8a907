"""Stop graph service - Main orchestrator.

Builds the graph from the stops source, exports it, and runs the
geographic filter over one area or every preset area, exporting each
non-empty subgraph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from ..config import OutputConfig, get_config
from ..domain.areas import PRESET_AREAS
from ..domain.errors import RenderingError
from ..domain.models import FilterResult, GeographicBounds, IngestReport
from ..graph.bbox_filter import extract_subgraph, filter_in_bounds
from ..graph.store import GraphStore
from ..ports.rendering import MapRendererPort
from ..ports.serialization import GraphSerializerPort
from .ingestion_service import StopIngestionService


@dataclass(frozen=True)
class AreaRun:
    """Outcome of filtering and exporting one area.

    Attributes:
        area_key: Key used in file names
        result: Filter result for the area
        graph: Closed subgraph of the retained entities
        output_path: Turtle file written, None when the area was empty
        map_path: Map written, None when no map was requested or produced
    """

    area_key: str
    result: FilterResult
    graph: GraphStore
    output_path: Optional[Path] = None
    map_path: Optional[Path] = None


@dataclass
class StopGraphService:
    """Main service tying ingestion, filtering and export together.

    Attributes:
        ingestion: Builds stores from the stops source
        serializer: Writes stores as RDF files
        map_renderer: Optional map rendering
        output: Output file configuration
    """

    ingestion: StopIngestionService
    serializer: GraphSerializerPort
    map_renderer: Optional[MapRendererPort] = None
    output: OutputConfig = field(default_factory=lambda: get_config().output)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(self, path: Optional[Path] = None) -> Tuple[GraphStore, IngestReport]:
        """Create a fresh store and fill it from the stops source.

        Raises:
            SourceReadError: If the source cannot be read.
        """
        store = GraphStore()
        report = self.ingestion.ingest_file(store, path)
        return store, report

    def export(self, store: GraphStore) -> List[Path]:
        """Write the full graph as Turtle and as RDF/XML.

        Raises:
            SerializationError: If a file cannot be written.
        """
        return [
            self.serializer.write(
                store, self.output.output_dir / self.output.turtle_file, "turtle"
            ),
            self.serializer.write(
                store, self.output.output_dir / self.output.rdfxml_file, "xml"
            ),
        ]

    def run_area(
        self,
        store: GraphStore,
        bounds: GeographicBounds,
        area_key: str,
        render_map: bool = False,
    ) -> AreaRun:
        """Filter one area and export its subgraph when it is not empty.

        Raises:
            SerializationError: If the subgraph cannot be written.
        """
        result = filter_in_bounds(store, bounds)
        subgraph = extract_subgraph(store, result.subjects)

        if result.is_empty:
            self._logger.warning(
                "Area is empty, no file written",
                extra={"area": area_key},
            )
            return AreaRun(area_key=area_key, result=result, graph=subgraph)

        output_path = self.serializer.write(
            subgraph, self.output.filtered_path(area_key), "turtle"
        )

        map_path: Optional[Path] = None
        if render_map and self.map_renderer is not None:
            try:
                map_path = self.map_renderer.render(
                    result.entities, self.output.map_path(area_key), bounds
                )
            except RenderingError as e:
                # The subgraph is already exported; a missing map is not fatal.
                self._logger.warning(
                    "Map generation failed",
                    extra={"area": area_key, "error": str(e)},
                )

        return AreaRun(
            area_key=area_key,
            result=result,
            graph=subgraph,
            output_path=output_path,
            map_path=map_path,
        )

    def run_presets(
        self,
        store: GraphStore,
        areas: Optional[Mapping[str, GeographicBounds]] = None,
        render_map: bool = False,
    ) -> List[AreaRun]:
        """Run every area of ``areas`` (the presets by default), in order."""
        areas = PRESET_AREAS if areas is None else areas
        return [
            self.run_area(store, bounds, key, render_map)
            for key, bounds in areas.items()
        ]
