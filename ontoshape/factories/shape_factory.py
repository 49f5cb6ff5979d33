"""Build SHACL shapes graphs from an ontology inventory and a shape configuration.

Two shape topologies are supported:

1. Class-scoped: a node shape with `sh:targetClass` and one inline (blank node)
   property shape per selected property.
2. Global property-scoped: a single `sh:PropertyShape` targeting
   `sh:targetSubjectsOf` every selected property. All properties share the shape
   node.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, NamedTuple

from rdflib import BNode, Literal, URIRef

from ontoshape.exceptions import InvalidConstraint, ShapeConfigError
from ontoshape.graph import Graph
from ontoshape.namespaces import EX, RDF, SH, XSD
from ontoshape.pydantic_models.constraints import Bound
from ontoshape.pydantic_models.shape_config import ShapeTopology

if TYPE_CHECKING:  # pragma: no cover
    from rdflib.term import Node

    from ontoshape.pydantic_models.constraints import ConstraintEntry
    from ontoshape.pydantic_models.inventory import OntologyInventory
    from ontoshape.pydantic_models.shape_config import ShapeConfig


LOGGER = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_NAME = "Global"

_CARDINALITY_PREDICATES = {Bound.MIN: SH.minCount, Bound.MAX: SH.maxCount}


class ShapesGraph(NamedTuple):
    """A generated shapes graph."""

    shape: URIRef
    graph: Graph


def last_segment(iri: str) -> str:
    """Return the part of `iri` after its last `#` or `/`.

    The whole IRI is returned if it contains neither.
    """
    return re.split(r"[#/]", str(iri))[-1]


def shape_name(
    target_class: str | None, placeholder: str = DEFAULT_PLACEHOLDER_NAME
) -> URIRef:
    """Name of the shape for `target_class`, e.g., `ex:PersonShape`."""
    local_name = last_segment(target_class) if target_class else placeholder
    return EX[f"{local_name}Shape"]


def add_constraints(
    graph: Graph, target: Node, prop: str, entry: ConstraintEntry
) -> None:
    """Add cardinality, message and pattern triples for `entry` to `target`.

    Empty fields add nothing.

    Raises:
        InvalidConstraint: If a count is not a non-negative integer.

    """
    for bound, predicate in _CARDINALITY_PREDICATES.items():
        try:
            count = entry.count(bound)
        except InvalidConstraint as exc:
            raise InvalidConstraint(f"Property <{prop}>: {exc}") from exc

        if count is None:
            continue

        graph.append((target, predicate, Literal(count, datatype=XSD.integer)))

        message = entry.message(bound)
        if message:
            graph.append((target, SH.message, Literal(message)))

    if entry.pattern:
        graph.append((target, SH.pattern, Literal(entry.pattern)))


def build_shapes(
    inventory: OntologyInventory,
    config: ShapeConfig,
    placeholder: str = DEFAULT_PLACEHOLDER_NAME,
) -> ShapesGraph:
    """Build the SHACL shapes graph for the selected properties.

    Parameters:
        inventory: The inventory of the current ontology. Selected properties not in
            it (left over from an earlier ontology) are skipped.
        config: Topology, target class and the selected properties with their
            constraints.
        placeholder: Local name for the shape when there is no target class.

    Returns:
        The shape name and the generated triples.

    Raises:
        ShapeConfigError: If none of the selected properties is in `inventory`.
        InvalidConstraint: If a count is not a non-negative integer.

    """
    shape = shape_name(config.target_class, placeholder)
    graph = Graph()
    global_shape = config.topology == ShapeTopology.GLOBAL_PROPERTY_SCOPED

    if not global_shape:
        graph.append((shape, SH.targetClass, URIRef(config.target_class)))

    known_properties = set(inventory.properties)
    built = 0

    for prop, entry in config.selected_properties.items():
        if prop not in known_properties:
            LOGGER.warning("Skipping <%s>: not a property of the ontology.", prop)
            continue

        path = URIRef(prop)
        if global_shape:
            graph.append((shape, RDF.type, SH.PropertyShape))
            graph.append((shape, SH.targetSubjectsOf, path))
            graph.append((shape, SH.path, path))
            target: Node = shape
        else:
            target = BNode()
            graph.append((shape, SH.property, target))
            graph.append((target, SH.path, path))

        add_constraints(graph, target, prop, entry)
        built += 1

    if not built:
        raise ShapeConfigError(
            "None of the selected properties is a property of the ontology."
        )

    LOGGER.info("Built %s with %d triples.", shape.n3(), len(graph))
    return ShapesGraph(shape=shape, graph=graph)
