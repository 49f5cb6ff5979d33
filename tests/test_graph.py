"""Tests for `ontoshape.graph`."""

from __future__ import annotations

import pytest
from rdflib import Literal, URIRef
from rdflib.namespace import OWL, RDF, RDFS

EX_NS = "http://ex.org/"

PERSON = URIRef(f"{EX_NS}Person")
NAME = URIRef(f"{EX_NS}name")


def test_match_wildcards() -> None:
    """`None` matches any term, and matching keeps insertion order."""
    from ontoshape.graph import Graph

    graph = Graph(
        [
            (PERSON, RDF.type, OWL.Class),
            (NAME, RDF.type, OWL.DatatypeProperty),
            (NAME, RDFS.label, Literal("Name")),
        ]
    )

    assert list(graph.match()) == graph.triples
    assert list(graph.match(None, RDF.type, None)) == [
        (PERSON, RDF.type, OWL.Class),
        (NAME, RDF.type, OWL.DatatypeProperty),
    ]
    assert list(graph.match(NAME, None, None)) == graph.triples[1:]
    assert list(graph.match(None, None, OWL.Class)) == [(PERSON, RDF.type, OWL.Class)]
    assert list(graph.match(None, RDFS.comment, None)) == []


def test_match_empty_literal() -> None:
    """An empty literal is a term to match, not a wildcard."""
    from ontoshape.graph import Graph

    graph = Graph(
        [
            (NAME, RDFS.label, Literal("")),
            (NAME, RDFS.label, Literal("Name")),
        ]
    )

    assert list(graph.match(None, None, Literal(""))) == [
        (NAME, RDFS.label, Literal(""))
    ]


def test_append_ignores_duplicates() -> None:
    """A triple is only stored once."""
    from ontoshape.graph import Graph

    graph = Graph()
    graph.append((PERSON, RDF.type, OWL.Class))
    graph.append((PERSON, RDF.type, OWL.Class))

    assert len(graph) == 1
    assert (PERSON, RDF.type, OWL.Class) in graph

    graph.clear()
    assert len(graph) == 0
    assert (PERSON, RDF.type, OWL.Class) not in graph


def test_parse(person_ontology: str) -> None:
    """Parsing Turtle text loads its triples."""
    from ontoshape.graph import Graph

    graph = Graph().parse(person_ontology)

    assert (PERSON, RDF.type, OWL.Class) in graph
    assert (NAME, RDFS.label, Literal("Name")) in graph
    assert len(list(graph.match(URIRef(f"{EX_NS}knows"), RDF.type, None))) == 2


@pytest.mark.parametrize(
    "text",
    [
        '<http://ex.org/a> <http://ex.org/b> "unterminated .',
        "ex:Person a owl:Class .",
        "<http://ex.org/a> <http://ex.org/b> .",
    ],
    ids=["unterminated literal", "unknown prefix", "missing object"],
)
def test_parse_invalid_turtle(text: str) -> None:
    """Malformed Turtle raises a `ParseError` and leaves the graph untouched."""
    from ontoshape.exceptions import ParseError
    from ontoshape.graph import Graph

    graph = Graph([(PERSON, RDF.type, OWL.Class)])

    with pytest.raises(ParseError):
        graph.parse(text)

    assert graph.triples == [(PERSON, RDF.type, OWL.Class)]
