"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GeographicBounds, SpatialEntity


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers place filtered stops on an interactive map.
    """

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
        """
        ...
