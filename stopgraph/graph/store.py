"""Append-only triple store.

The store keeps every fact in insertion order and maintains two derived
indexes over that sequence:

- subject -> facts with that subject, in insertion order
- (predicate, object) -> subjects asserting the pair, in first-assertion order

Duplicate facts are legal and all retained. There is no removal or update
API: a store is filled once (ingestion) and then only read.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..domain.models import IRI, Fact, Node
from ..domain.vocabulary import DEFAULT_PREFIXES


class GraphStore:
    """Ordered multiset of facts with subject and predicate/object lookups."""

    def __init__(self, prefixes: Optional[Mapping[str, str]] = None) -> None:
        self._facts: List[Fact] = []
        self._by_subject: Dict[IRI, List[Fact]] = {}
        # dict values unused; keys give an insertion-ordered set
        self._by_pair: Dict[Tuple[IRI, Node], Dict[IRI, None]] = {}
        self._prefixes: Dict[str, str] = dict(
            DEFAULT_PREFIXES if prefixes is None else prefixes
        )

    @classmethod
    def with_prefixes_of(cls, other: GraphStore) -> GraphStore:
        """Create an empty store carrying a copy of ``other``'s prefixes."""
        return cls(prefixes=other.namespaces())

    def append(self, fact: Fact) -> None:
        self._facts.append(fact)
        self._by_subject.setdefault(fact.subject, []).append(fact)
        self._by_pair.setdefault((fact.predicate, fact.object), {})[
            fact.subject
        ] = None

    def extend(self, facts: Iterable[Fact]) -> None:
        for fact in facts:
            self.append(fact)

    def facts_for(self, subject: IRI) -> Iterator[Fact]:
        """Iterate the facts of ``subject`` in insertion order.

        Unknown subjects yield nothing.
        """
        return iter(self._by_subject.get(subject, ()))

    def subjects_with(self, predicate: IRI, obj: Node) -> List[IRI]:
        """Return the subjects asserting ``(predicate, obj)``, each once."""
        return list(self._by_pair.get((predicate, obj), ()))

    def objects_for(self, subject: IRI, predicate: IRI) -> Iterator[Node]:
        """Iterate the objects ``subject`` has under ``predicate``."""
        return (
            fact.object
            for fact in self.facts_for(subject)
            if fact.predicate == predicate
        )

    def list_all_facts(self) -> Iterator[Fact]:
        return iter(self._facts)

    def size(self) -> int:
        return len(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, fact: object) -> bool:
        if not isinstance(fact, Fact):
            return False
        return fact in self._by_subject.get(fact.subject, ())

    def bind(self, prefix: str, namespace: str) -> None:
        """Register (or replace) a namespace prefix."""
        self._prefixes[prefix] = namespace

    def namespaces(self) -> Dict[str, str]:
        """Return a copy of the prefix -> namespace mapping."""
        return dict(self._prefixes)

    def __repr__(self) -> str:
        return (
            f"GraphStore(facts={len(self._facts)}, "
            f"subjects={len(self._by_subject)})"
        )
