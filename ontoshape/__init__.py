"""ontoshape - derive SHACL shapes from OWL/RDFS ontologies."""

from __future__ import annotations

import logging

from .extractor import extract
from .factories import ShapesGraph, build_shapes
from .graph import Graph
from .pydantic_models.constraint_model import ConstraintModel
from .pydantic_models.constraints import Bound, ConstraintEntry
from .pydantic_models.inventory import OntologyInventory
from .pydantic_models.shape_config import ShapeConfig, ShapeTopology
from .session import ShaclGenerator
from .turtle import Turtle

__version__ = "0.1.0"

__all__ = (
    "Bound",
    "ConstraintEntry",
    "ConstraintModel",
    "Graph",
    "OntologyInventory",
    "ShaclGenerator",
    "ShapeConfig",
    "ShapeTopology",
    "ShapesGraph",
    "Turtle",
    "__version__",
    "build_shapes",
    "extract",
)

logging.getLogger("ontoshape").setLevel(logging.DEBUG)
