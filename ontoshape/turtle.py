"""Turtle writer for generated shapes graphs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rdflib import Graph as RDFGraph
from rdflib.exceptions import Error as RDFLibException

from ontoshape.exceptions import SerializationError
from ontoshape.namespaces import DEFAULT_PREFIXES

if TYPE_CHECKING:  # pragma: no cover
    from typing import Optional, Union

    from ontoshape.factories.shape_factory import ShapesGraph


LOGGER = logging.getLogger(__name__)

DEFAULT_FILENAME = "shapes.ttl"
MEDIA_TYPE = "text/turtle"


class Turtle:
    """
    Turtle RDF format writer
    """

    @staticmethod
    def dumps(
        shapes: ShapesGraph, prefixes: Optional[dict[str, str]] = None
    ) -> str:
        """Serialize `shapes` as Turtle.

        Parameters:
            shapes: The generated shapes graph.
            prefixes: Extra prefixes to bind. `sh` and `ex` are always bound.

        Raises:
            SerializationError: If the Turtle writer fails.

        """
        graph = RDFGraph(bind_namespaces="core")
        for prefix, namespace in {**(prefixes or {}), **DEFAULT_PREFIXES}.items():
            graph.bind(prefix, namespace, override=True, replace=True)

        for triple in shapes.graph:
            graph.add(triple)

        try:
            output = graph.serialize(format="turtle")
        except (RDFLibException, ValueError, TypeError) as exc:
            raise SerializationError(
                f"Could not serialize {shapes.shape.n3()} as Turtle: {exc}"
            ) from exc

        LOGGER.debug("Serialized %d triples.", len(graph))
        return output

    @staticmethod
    def dump(
        shapes: ShapesGraph,
        file: Union[Path, str] = DEFAULT_FILENAME,
        prefixes: Optional[dict[str, str]] = None,
        media_type: str = MEDIA_TYPE,
    ) -> Path:
        """Write `shapes` as Turtle to `file`.

        Returns:
            The path written to.

        """
        path = Path(file)
        path.write_text(Turtle.dumps(shapes, prefixes), encoding="utf-8")
        LOGGER.info("Wrote %s (%s).", path, media_type)
        return path
