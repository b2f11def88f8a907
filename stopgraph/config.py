"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- SG_INGEST_DATA_DIR=/path/to/google_transit
- SG_INGEST_MAX_LINES=1000
- SG_OUTPUT_OUTPUT_DIR=/tmp/rdf
- SG_FILTER_DEFAULT_AREA=extremadura
- SG_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.vocabulary import EX_NS


class IngestConfig(BaseSettings):
    """Stops source configuration.

    Environment variables prefixed with SG_INGEST_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_INGEST_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stops_file: str = "stops.txt"
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    max_lines: Optional[int] = Field(default=200, ge=0)
    progress_every: int = Field(default=50, gt=0)
    base_iri: str = EX_NS

    @property
    def stops_path(self) -> Path:
        """Full path to the stops file."""
        return self.data_dir / self.stops_file


class OutputConfig(BaseSettings):
    """Output file configuration.

    Environment variables prefixed with SG_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_OUTPUT_")

    output_dir: Path = Path("output")
    turtle_file: str = "estaciones.ttl"
    rdfxml_file: str = "estaciones.rdf"
    filtered_prefix: str = "estaciones_"
    map_suffix: str = "_mapa.html"

    def filtered_path(self, area_key: str) -> Path:
        """Turtle file for the subgraph of one area."""
        return self.output_dir / f"{self.filtered_prefix}{area_key}.ttl"

    def map_path(self, area_key: str) -> Path:
        """HTML map for the entities of one area."""
        return self.output_dir / f"{self.filtered_prefix}{area_key}{self.map_suffix}"


class FilterConfig(BaseSettings):
    """Geographic filter configuration.

    Environment variables prefixed with SG_FILTER_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_FILTER_")

    # Area run when the CLI gets no selection; None runs every preset.
    default_area: Optional[str] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.ingest.stops_path)
        print(config.output.output_dir)

    Environment variables prefixed with SG_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_")

    ingest: IngestConfig = Field(default_factory=IngestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the cached application configuration.

    Configuration is loaded once. To reload it (e.g., in tests), call
    reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
