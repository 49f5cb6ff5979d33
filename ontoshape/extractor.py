"""Extract classes, properties and labels from an ontology graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ontoshape.namespaces import OWL, RDF, RDFS
from ontoshape.pydantic_models.inventory import OntologyInventory

if TYPE_CHECKING:  # pragma: no cover
    from ontoshape.graph import Graph


LOGGER = logging.getLogger(__name__)

PROPERTY_TYPE_MARKER = "Property"
"""Any `rdf:type` whose IRI contains this text marks its subject as a property.

This matches `owl:ObjectProperty`, `owl:DatatypeProperty`, `rdf:Property`, etc.
"""


def extract(graph: Graph) -> OntologyInventory:
    """Walk `graph` and collect its classes, properties and labels.

    Parameters:
        graph: The parsed ontology. It is not modified.

    Returns:
        The ontology inventory. Classes are de-duplicated, properties are not (one
        entry per matching `rdf:type` triple), and the last `rdfs:label` seen for a
        subject wins.

    """
    classes: dict[str, None] = {}
    for subject, _, _ in graph.match(None, RDF.type, OWL.Class):
        classes.setdefault(str(subject))

    properties = [
        str(subject)
        for subject, _, type_ in graph.match(None, RDF.type, None)
        if PROPERTY_TYPE_MARKER in str(type_)
    ]

    labels: dict[str, str] = {}
    for subject, _, label in graph.match(None, RDFS.label, None):
        labels[str(subject)] = str(label)

    LOGGER.debug(
        "Extracted %d classes, %d properties and %d labels.",
        len(classes),
        len(properties),
        len(labels),
    )
    return OntologyInventory(
        classes=list(classes), properties=properties, labels=labels
    )
