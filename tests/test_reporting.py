from stopgraph.domain.models import (
    IRI,
    Fact,
    FilterResult,
    GeographicBounds,
    SpatialEntity,
    StopRecord,
    TypedLiteral,
)
from stopgraph.domain.vocabulary import EX_NS, GEO_LAT
from stopgraph.graph.builder import build_spatial_entity
from stopgraph.graph.store import GraphStore
from stopgraph.services.reporting import (
    format_fact,
    format_filter_result,
    format_generated_files,
    format_sample,
    format_statistics,
)

MADRID = GeographicBounds(40.0, 41.0, -4.0, -3.0, "Madrid")


def _store(count: int) -> GraphStore:
    store = GraphStore()
    for i in range(count):
        build_spatial_entity(StopRecord(f"S{i}", f"Stop {i}", "40.5", "-3.5"), store)
    return store


def test_format_fact_uses_local_name():
    fact = Fact(IRI(EX_NS + "S"), GEO_LAT, TypedLiteral.decimal("40.5"))

    assert format_fact(fact) == (
        'lat → "40.5"^^http://www.w3.org/2001/XMLSchema#decimal'
    )


def test_statistics():
    text = format_statistics(_store(2))

    assert text.splitlines() == [
        "=== RDF MODEL STATISTICS ===",
        "Total triples: 8",
        "Stations: 2",
        "Statements per station: 4",
    ]


def test_statistics_of_empty_store():
    assert "Statements per station: 0" in format_statistics(GraphStore())


def test_sample_is_limited():
    text = format_sample(_store(5), limit=2)

    assert "Station 2: <http://www.ejemplo.com/S1>" in text
    assert "Station 3" not in text
    assert '  label → "Stop 0"@es' in text


def test_filter_result_lists_entities():
    entity = SpatialEntity(IRI(EX_NS + "ST1"), "Atocha", 40.5, -3.7)
    result = FilterResult(MADRID, (entity,), examined=4, retained=1)

    lines = format_filter_result(result).splitlines()

    assert lines[0] == "=== STATIONS IN MADRID ==="
    assert lines[2] == "Examined: 4, retained: 1 (25.0%)"
    assert lines[3].startswith(" 1. Atocha")
    assert lines[3].endswith("(40.5000, -3.7000) [ST1]")


def test_filter_result_when_empty():
    text = format_filter_result(FilterResult(MADRID, examined=3))

    assert "(0.0%)" in text
    assert text.endswith("No stations found in the selected area.")


def test_generated_files(tmp_path):
    (tmp_path / "estaciones.ttl").write_text("x" * 10, encoding="utf-8")
    (tmp_path / "estaciones.rdf").write_text("x" * 4096, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    lines = format_generated_files(tmp_path).splitlines()

    assert lines == [
        f"Generated files in '{tmp_path}':",
        "  • estaciones.rdf (4 KB)",
        "  • estaciones.ttl (10 B)",
    ]


def test_generated_files_missing_directory(tmp_path):
    missing = tmp_path / "nothing"

    assert format_generated_files(missing) == f"No generated files found in {missing}"
