"""RDF vocabulary used when reading ontologies and writing shapes."""

from __future__ import annotations

from rdflib import Namespace
from rdflib.namespace import OWL, RDF, RDFS, SH, XSD

EX = Namespace("http://example.org/")

DEFAULT_PREFIXES: dict[str, str] = {
    "sh": str(SH),
    "ex": str(EX),
}
"""Prefixes bound in every generated shapes document."""

__all__ = ("DEFAULT_PREFIXES", "EX", "OWL", "RDF", "RDFS", "SH", "XSD")
