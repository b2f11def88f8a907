import pytest

from stopgraph.domain.errors import InvalidCoordinateError, MissingCoordinateError
from stopgraph.domain.models import (
    IRI,
    Fact,
    LangLiteral,
    PlainLiteral,
    StopRecord,
    TypedLiteral,
)
from stopgraph.domain.vocabulary import (
    DECIMAL_DATATYPE,
    EX_NS,
    GEO_LAT,
    GEO_LONG,
    GEO_SPATIAL_THING,
    RDF_TYPE,
    RDFS_LABEL,
    UNNAMED_LABEL,
)
from stopgraph.graph.builder import build_spatial_entity
from stopgraph.graph.spatial_view import extract_entity, list_spatial_entities
from stopgraph.graph.store import GraphStore

S = IRI(EX_NS + "S")


def _decimal(text: str) -> TypedLiteral:
    return TypedLiteral(text, DECIMAL_DATATYPE)


@pytest.mark.parametrize(
    "record",
    [
        StopRecord("ST1", "Atocha", "40.5", "-3.7"),
        StopRecord("05000", "Málaga-María Zambrano", "36.711536", "-4.432384"),
        StopRecord("Z", "Zero", "0", "-0.0"),
        StopRecord("N", "Pole", "90", "180"),
    ],
)
def test_build_then_extract_round_trip(record):
    store = GraphStore()
    subject = build_spatial_entity(record, store)

    entity = extract_entity(store, subject)

    assert entity.subject == subject
    assert entity.name == record.name
    assert entity.latitude == float(record.latitude)
    assert entity.longitude == float(record.longitude)


def test_missing_label_uses_placeholder():
    store = GraphStore()
    store.append(Fact(S, RDF_TYPE, GEO_SPATIAL_THING))
    store.append(Fact(S, GEO_LAT, _decimal("1.0")))
    store.append(Fact(S, GEO_LONG, _decimal("2.0")))

    assert extract_entity(store, S).name == UNNAMED_LABEL


def test_plain_label_is_accepted():
    store = GraphStore()
    store.append(Fact(S, RDFS_LABEL, PlainLiteral("Plain")))
    store.append(Fact(S, GEO_LAT, _decimal("1.0")))
    store.append(Fact(S, GEO_LONG, _decimal("2.0")))

    assert extract_entity(store, S).name == "Plain"


def test_first_label_wins():
    store = GraphStore()
    store.append(Fact(S, RDFS_LABEL, LangLiteral("First", "es")))
    store.append(Fact(S, RDFS_LABEL, LangLiteral("Second", "es")))
    store.append(Fact(S, GEO_LAT, _decimal("1.0")))
    store.append(Fact(S, GEO_LONG, _decimal("2.0")))

    assert extract_entity(store, S).name == "First"


@pytest.mark.parametrize("present, missing", [(GEO_LONG, GEO_LAT), (GEO_LAT, GEO_LONG)])
def test_missing_coordinate(present, missing):
    store = GraphStore()
    store.append(Fact(S, RDF_TYPE, GEO_SPATIAL_THING))
    store.append(Fact(S, present, _decimal("1.0")))

    with pytest.raises(MissingCoordinateError) as excinfo:
        extract_entity(store, S)
    assert excinfo.value.predicate == missing.value
    assert excinfo.value.subject == S.value


def test_non_numeric_coordinate():
    store = GraphStore()
    store.append(Fact(S, GEO_LAT, PlainLiteral("40.0")))
    store.append(Fact(S, GEO_LONG, _decimal("2.0")))

    with pytest.raises(InvalidCoordinateError):
        extract_entity(store, S)


def test_listing_skips_broken_subjects_and_continues():
    store = GraphStore()
    build_spatial_entity(StopRecord("A", "Alpha", "40.5", "-3.5"), store)
    broken = IRI(EX_NS + "BROKEN")
    store.append(Fact(broken, RDF_TYPE, GEO_SPATIAL_THING))
    store.append(Fact(broken, GEO_LAT, _decimal("40.5")))
    build_spatial_entity(StopRecord("B", "Beta", "41.0", "-3.0"), store)

    listing = list_spatial_entities(store)

    assert [e.name for e in listing.entities] == ["Alpha", "Beta"]
    assert [s.subject for s in listing.skipped] == [broken]
    assert "long" in listing.skipped[0].reason
    assert listing.examined == 3


def test_listing_ignores_untyped_subjects():
    store = GraphStore()
    store.append(Fact(S, GEO_LAT, _decimal("1.0")))
    store.append(Fact(S, GEO_LONG, _decimal("2.0")))

    listing = list_spatial_entities(store)

    assert listing.entities == ()
    assert listing.examined == 0
