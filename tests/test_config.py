from pathlib import Path

import pytest
from pydantic import ValidationError

from stopgraph.config import (
    AppConfig,
    IngestConfig,
    OutputConfig,
    get_config,
    reset_config,
)
from stopgraph.domain.areas import DEFAULT_AREA, PRESET_AREAS, get_area
from stopgraph.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.ingest.stops_file == "stops.txt"
    assert config.ingest.max_lines == 200
    assert config.ingest.delimiter == ","
    assert config.ingest.stops_path.name == "stops.txt"
    assert config.output.turtle_file == "estaciones.ttl"
    assert config.output.rdfxml_file == "estaciones.rdf"
    assert config.filter.default_area is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SG_INGEST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SG_INGEST_MAX_LINES", "1000")
    monkeypatch.setenv("SG_OUTPUT_OUTPUT_DIR", "/tmp/rdf")
    monkeypatch.setenv("SG_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.ingest.stops_path == tmp_path / "stops.txt"
    assert config.ingest.max_lines == 1000
    assert config.output.output_dir == Path("/tmp/rdf")
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reset_config_reloads(monkeypatch):
    first = get_config()
    monkeypatch.setenv("SG_FILTER_DEFAULT_AREA", "extremadura")
    reset_config()

    second = get_config()

    assert second is not first
    assert second.filter.default_area == "extremadura"


@pytest.mark.parametrize(
    "overrides",
    [{"delimiter": ""}, {"delimiter": ";;"}, {"max_lines": -1}, {"progress_every": 0}],
)
def test_invalid_ingest_settings(overrides):
    with pytest.raises(ValidationError):
        IngestConfig(**overrides)


def test_output_paths(tmp_path):
    output = OutputConfig(output_dir=tmp_path)

    assert output.filtered_path("madrid") == tmp_path / "estaciones_madrid.ttl"
    assert output.map_path("madrid") == tmp_path / "estaciones_madrid_mapa.html"


def test_get_area_is_case_insensitive():
    assert get_area(" Madrid ") is PRESET_AREAS["madrid"]


def test_get_area_unknown():
    with pytest.raises(ConfigurationError) as excinfo:
        get_area("atlantis")
    assert excinfo.value.setting_name == "area"


def test_default_area_matches_madrid_rectangle():
    madrid = PRESET_AREAS["madrid"]
    assert DEFAULT_AREA.min_lat == madrid.min_lat
    assert DEFAULT_AREA.max_lat == madrid.max_lat
    assert DEFAULT_AREA.min_lon == madrid.min_lon
    assert DEFAULT_AREA.max_lon == madrid.max_lon
