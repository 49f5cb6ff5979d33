"""A shape generation session.

The session owns the state of one user working on one ontology at a time: the
ontology text, the extracted inventory, the constraint model and the last generated
Turtle output. Every action runs to completion before the next one starts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ontoshape.extractor import extract
from ontoshape.factories import build_shapes
from ontoshape.graph import Graph
from ontoshape.pydantic_models._utils import load_ontology_text
from ontoshape.pydantic_models.constraint_model import ConstraintModel
from ontoshape.pydantic_models.inventory import OntologyInventory
from ontoshape.pydantic_models.settings import load_settings
from ontoshape.turtle import Turtle

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any, Optional, Union

    from pydantic import AnyUrl

    from ontoshape.factories import ShapesGraph
    from ontoshape.pydantic_models.settings import GeneratorSettings


LOGGER = logging.getLogger(__name__)


class ShaclGenerator:
    """Derive SHACL shapes from an ontology, one user action at a time.

    A failed `parse()` keeps the previous inventory and a failed `generate()` keeps
    the previous output.
    """

    def __init__(
        self,
        settings: Optional[Union[GeneratorSettings, dict[str, Any], Path, str]] = None,
    ) -> None:
        self.settings = load_settings(settings)
        self.ontology_text = ""
        self.graph = Graph()
        self.inventory = OntologyInventory()
        self.constraints = ConstraintModel()
        self.shapes: ShapesGraph | None = None
        self.output = ""

    def load(self, source: Union[AnyUrl, Path, str, bytes, bytearray]) -> str:
        """Read ontology text from a URL, path or raw string, without parsing it."""
        self.ontology_text = load_ontology_text(source, timeout=self.settings.timeout)
        LOGGER.debug("Loaded %d characters of ontology text.", len(self.ontology_text))
        return self.ontology_text

    def parse(self, text: Optional[str] = None) -> OntologyInventory:
        """Parse the ontology text and rebuild the inventory.

        Constraint entries are kept, even for properties the new ontology lacks.

        Raises:
            ParseError: If the text is not valid Turtle.

        """
        if text is None:
            text = self.ontology_text

        graph = Graph().parse(text)
        self.ontology_text = text
        self.graph = graph
        self.inventory = extract(graph)
        LOGGER.info(
            "Parsed ontology: %d classes, %d properties.",
            len(self.inventory.classes),
            len(self.inventory.properties),
        )
        return self.inventory

    def generate(self) -> str:
        """Build the shapes graph and render it as Turtle.

        Raises:
            ShapeConfigError: If no property of the current ontology is selected, or
                no target class is set for a class-scoped shape.
            InvalidConstraint: If a count is not a non-negative integer.
            SerializationError: If the Turtle writer fails.

        """
        config = self.constraints.to_shape_config()
        shapes = build_shapes(
            self.inventory, config, placeholder=self.settings.placeholder_name
        )
        output = Turtle.dumps(shapes, self.settings.prefixes)

        self.shapes = shapes
        self.output = output
        return output

    def download(self, directory: Union[Path, str] = ".") -> Path:
        """Write the last generated shapes to the configured file in `directory`.

        Raises:
            ValueError: If nothing has been generated yet.
            SerializationError: If the Turtle writer fails.

        """
        if self.shapes is None:
            raise ValueError("Nothing to download, generate the shapes first.")

        return Turtle.dump(
            self.shapes,
            Path(directory) / self.settings.output_filename,
            self.settings.prefixes,
            media_type=self.settings.media_type,
        )
