"""Tests for the Folium map renderer adapter."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from stopgraph.adapters.rendering import FoliumMapRenderer
from stopgraph.domain.errors import RenderingError
from stopgraph.domain.models import IRI, GeographicBounds, SpatialEntity

ENTITIES = (
    SpatialEntity(IRI("http://www.ejemplo.com/ST1"), "Atocha", 40.5, -3.7),
    SpatialEntity(IRI("http://www.ejemplo.com/ST3"), "Edge", 41.0, -3.0),
)
BOUNDS = GeographicBounds(40.0, 41.0, -4.0, -3.0, "Madrid")


class TestFoliumMapRenderer:
    @pytest.fixture
    def mock_folium(self):
        mock = MagicMock()
        with patch.dict(sys.modules, {"folium": mock}):
            yield mock

    def test_empty_entities_raise(self, tmp_path):
        with pytest.raises(RenderingError) as excinfo:
            FoliumMapRenderer().render([], tmp_path / "map.html")
        assert excinfo.value.renderer_type == "folium"

    def test_centres_on_bounds_and_outlines_them(self, mock_folium, tmp_path):
        target = tmp_path / "map.html"

        result = FoliumMapRenderer(zoom_start=9).render(ENTITIES, target, BOUNDS)

        assert result == target
        mock_folium.Map.assert_called_once_with(location=[40.5, -3.5], zoom_start=9)
        rectangle = mock_folium.Rectangle.call_args.kwargs
        assert rectangle["bounds"] == [[40.0, -4.0], [41.0, -3.0]]
        assert mock_folium.Marker.call_count == 2
        mock_folium.Map.return_value.save.assert_called_once_with(str(target))

    def test_centres_on_mean_without_bounds(self, mock_folium, tmp_path):
        FoliumMapRenderer().render(ENTITIES, tmp_path / "map.html")

        location = mock_folium.Map.call_args.kwargs["location"]
        assert location == pytest.approx([40.75, -3.35])
        mock_folium.Rectangle.assert_not_called()

    def test_marker_shows_name_and_local_name(self, mock_folium, tmp_path):
        FoliumMapRenderer().render(ENTITIES[:1], tmp_path / "map.html")

        marker = mock_folium.Marker.call_args.kwargs
        assert marker["location"] == [40.5, -3.7]
        assert marker["popup"] == "Atocha"
        assert marker["tooltip"] == "ST1"

    def test_folium_failure_is_wrapped(self, mock_folium, tmp_path):
        mock_folium.Map.return_value.save.side_effect = OSError("disk full")

        with pytest.raises(RenderingError) as excinfo:
            FoliumMapRenderer().render(ENTITIES, tmp_path / "map.html")
        assert isinstance(excinfo.value.cause, OSError)

    def test_missing_folium(self, tmp_path):
        with patch.dict(sys.modules, {"folium": None}):
            with pytest.raises(RenderingError) as excinfo:
                FoliumMapRenderer().render(ENTITIES, tmp_path / "map.html")
        assert isinstance(excinfo.value.cause, ImportError)

    def test_writes_real_html(self, tmp_path):
        pytest.importorskip("folium")
        target = tmp_path / "out" / "map.html"

        FoliumMapRenderer().render(ENTITIES, target, BOUNDS)

        html = target.read_text(encoding="utf-8")
        assert "Atocha" in html
