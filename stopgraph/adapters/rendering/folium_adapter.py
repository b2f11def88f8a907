"""Folium map renderer adapter.

Places the stops retained by a geographic filter on an interactive
HTML map, with the filter rectangle outlined.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...domain.errors import RenderingError
from ...domain.models import GeographicBounds, SpatialEntity


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort using Folium for
    generating interactive HTML maps.

    Attributes:
        zoom_start: Initial zoom level of the map
    """

    zoom_start: int = 8
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        entities: Sequence[SpatialEntity],
        output_path: Path,
        bounds: Optional[GeographicBounds] = None,
    ) -> Path:
        """Render entities on a map and save to file.

        Args:
            entities: Entities to place as markers.
            output_path: Where to save the rendered map.
            bounds: Optional filter rectangle to outline.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering fails.
        """
        if not entities:
            raise RenderingError(
                "Cannot render an empty set of stops",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering stops map",
            extra={
                "stops": len(entities),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            if bounds is not None:
                center_lat = (bounds.min_lat + bounds.max_lat) / 2
                center_lon = (bounds.min_lon + bounds.max_lon) / 2
            else:
                center_lat = sum(e.latitude for e in entities) / len(entities)
                center_lon = sum(e.longitude for e in entities) / len(entities)

            m = folium.Map(location=[center_lat, center_lon], zoom_start=self.zoom_start)

            if bounds is not None:
                folium.Rectangle(
                    bounds=[
                        [bounds.min_lat, bounds.min_lon],
                        [bounds.max_lat, bounds.max_lon],
                    ],
                    color="blue",
                    weight=2,
                    fill=False,
                    tooltip=bounds.name or None,
                ).add_to(m)

            for entity in entities:
                folium.Marker(
                    location=[entity.latitude, entity.longitude],
                    popup=entity.name,
                    tooltip=entity.local_name,
                    icon=folium.Icon(color="red"),
                ).add_to(m)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
