"""Graph"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rdflib import Graph as RDFGraph
from rdflib.exceptions import Error as RDFLibException

from ontoshape.exceptions import ParseError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Generator, Iterable, Iterator

    from rdflib.term import Node

    Triple = tuple[Node, Node, Node]


LOGGER = logging.getLogger(__name__)


class Graph:
    """RDF Triple Graph.

    Triples are kept in the order they were added, which is the scan order seen by
    `match()`. Adding a triple that is already present is a no-op.
    """

    def __init__(self, triples: Iterable[Triple] | None = None) -> None:
        self.triples: list[Triple] = []
        self._index: set[Triple] = set()
        for triple in triples or []:
            self.append(triple)

    def __len__(self) -> int:
        return len(self.triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(self.triples)

    def __contains__(self, triple: object) -> bool:
        return triple in self._index

    def clear(self):
        """Clear graph."""
        self.triples.clear()
        self._index.clear()

    def append(self, triple: Triple):
        """Add an RDF triple."""
        if triple not in self._index:
            self._index.add(triple)
            self.triples.append(triple)

    def match(self, s=None, p=None, o=None) -> Generator[Triple, None, None]:
        """Yield all matching triples.

        `None` matches anything.
        """
        for triple in self.triples:
            if (
                (s is None or triple[0] == s)
                and (p is None or triple[1] == p)
                and (o is None or triple[2] == o)
            ):
                yield triple

    def parse(self, data: str, fmt: str = "turtle") -> Graph:
        """Add the triples found in the RDF text `data`.

        Raises:
            ParseError: If `data` is not valid for the given format.

        """
        try:
            graph = RDFGraph().parse(data=data, format=fmt)
        except (SyntaxError, RDFLibException, ValueError) as exc:
            raise ParseError(f"Could not parse ontology as {fmt!r}: {exc}") from exc

        before = len(self)
        for triple in graph.triples((None, None, None)):
            self.append(triple)
        LOGGER.debug("Parsed %d new triples.", len(self) - before)
        return self
