"""Pydantic data model for a single shape generation run."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.functional_validators import model_validator

from ontoshape.pydantic_models.constraints import ConstraintEntry


class ShapeTopology(str, Enum):
    """How the generated shape targets focus nodes."""

    CLASS_SCOPED = "class"
    """A node shape with `sh:targetClass` and one inline property shape per
    property."""

    GLOBAL_PROPERTY_SCOPED = "global"
    """A single property shape targeting `sh:targetSubjectsOf` each property."""


class ShapeConfig(BaseModel):
    """Everything the shape builder needs besides the ontology inventory."""

    model_config = ConfigDict(frozen=True)

    topology: Annotated[
        ShapeTopology, Field(description="The shape topology to generate.")
    ] = ShapeTopology.CLASS_SCOPED

    target_class: Annotated[
        Optional[str],
        Field(
            description=(
                "Target class IRI. Required for class-scoped shapes, only used for "
                "naming otherwise."
            ),
        ),
    ] = None

    selected_properties: Annotated[
        dict[str, ConstraintEntry],
        Field(
            description="Selected property IRIs, in order, with their constraints.",
            min_length=1,
        ),
    ]

    @model_validator(mode="after")
    def class_scoped_needs_target(self) -> ShapeConfig:
        """Class-scoped shapes must have a target class."""
        if self.topology == ShapeTopology.CLASS_SCOPED and not self.target_class:
            raise ValueError("target_class is required for class-scoped shapes.")
        return self
