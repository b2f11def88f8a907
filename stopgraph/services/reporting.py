"""Plain-text reports over graph stores and filter results."""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import Iterable, List

from ..domain.models import Fact, FilterResult
from ..graph.spatial_view import spatial_subjects
from ..graph.store import GraphStore


def format_fact(fact: Fact) -> str:
    """Render one fact as ``predicate → object``, the predicate by local name."""
    return f"{fact.predicate.local_name} → {fact.object}"


def format_statistics(store: GraphStore) -> str:
    stations = len(spatial_subjects(store))
    per_station = store.size() // stations if stations else 0
    return "\n".join(
        [
            "=== RDF MODEL STATISTICS ===",
            f"Total triples: {store.size()}",
            f"Stations: {stations}",
            f"Statements per station: {per_station}",
        ]
    )


def format_sample(store: GraphStore, limit: int = 3) -> str:
    """Render every fact of the first ``limit`` stations."""
    lines = ["=== RDF SAMPLE ==="]
    for index, subject in enumerate(islice(spatial_subjects(store), limit), start=1):
        lines.append(f"Station {index}: <{subject}>")
        lines.extend(f"  {format_fact(fact)}" for fact in store.facts_for(subject))
    return "\n".join(lines)


def format_filter_result(result: FilterResult) -> str:
    title = (result.bounds.name or "selected area").upper()
    lines = [
        f"=== STATIONS IN {title} ===",
        f"Area: {result.bounds}",
        f"Examined: {result.examined}, retained: {result.retained} "
        f"({result.percentage:.1f}%)",
    ]
    if result.is_empty:
        lines.append("No stations found in the selected area.")
        return "\n".join(lines)
    lines.extend(
        f"{index:2d}. {entity}"
        for index, entity in enumerate(result.entities, start=1)
    )
    return "\n".join(lines)


def _human_size(size: int) -> str:
    return f"{size // 1024} KB" if size > 1024 else f"{size} B"


def format_generated_files(
    directory: Path,
    suffixes: Iterable[str] = (".ttl", ".rdf", ".nt", ".html"),
) -> str:
    """List generated files of ``directory`` with their sizes."""
    wanted = set(suffixes)
    files: List[Path] = []
    if directory.is_dir():
        files = sorted(p for p in directory.iterdir() if p.suffix in wanted)
    if not files:
        return f"No generated files found in {directory}"
    lines = [f"Generated files in '{directory}':"]
    lines.extend(f"  • {p.name} ({_human_size(p.stat().st_size)})" for p in files)
    return "\n".join(lines)
