"""The editable constraint state of a shape generation session."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from ontoshape.exceptions import ShapeConfigError
from ontoshape.pydantic_models.constraints import Bound, ConstraintEntry
from ontoshape.pydantic_models.shape_config import ShapeConfig, ShapeTopology


class ConstraintModel(BaseModel):
    """Selection, per-property constraints and topology behind a shape.

    Setters never validate. Entries are kept when a property is deselected (or when
    a new ontology no longer has the property), so re-selecting it restores the
    previous input.
    """

    topology: Annotated[
        ShapeTopology, Field(description="Shape topology for the next build.")
    ] = ShapeTopology.CLASS_SCOPED

    target_class: Annotated[
        Optional[str],
        Field(description="Target class IRI, used for class-scoped shapes."),
    ] = None

    selected: Annotated[
        list[str], Field(description="Selected property IRIs, in selection order.")
    ] = []

    entries: Annotated[
        dict[str, ConstraintEntry],
        Field(description="Constraint entries keyed by property IRI."),
    ] = {}

    def entry(self, prop: str) -> ConstraintEntry:
        """Return the entry for `prop`, or a default (empty) one."""
        return self.entries.get(str(prop), ConstraintEntry())

    def _update(self, prop: str, **fields: Optional[str]) -> None:
        self.entries[str(prop)] = self.entry(prop).model_copy(update=fields)

    def set_cardinality(self, prop: str, bound: Bound, value: Optional[str]) -> None:
        """Set the raw min/max count text of `prop`."""
        self._update(prop, **{Bound(bound).count_field: value})

    def set_message(self, prop: str, bound: Bound, text: Optional[str]) -> None:
        """Set the min/max violation message of `prop`."""
        self._update(prop, **{Bound(bound).message_field: text})

    def set_pattern(self, prop: str, text: Optional[str]) -> None:
        """Set the regular expression of `prop`."""
        self._update(prop, pattern=text)

    def toggle_selection(self, prop: str) -> bool:
        """Select `prop` if it is not selected, otherwise deselect it.

        Returns:
            Whether `prop` is selected afterwards.

        """
        prop = str(prop)
        if prop in self.selected:
            self.selected.remove(prop)
            return False
        self.selected.append(prop)
        return True

    def use_global_shape(self, enabled: bool = True) -> None:
        """Switch between class-scoped and global property shapes."""
        self.topology = (
            ShapeTopology.GLOBAL_PROPERTY_SCOPED
            if enabled
            else ShapeTopology.CLASS_SCOPED
        )

    def to_shape_config(self) -> ShapeConfig:
        """Freeze the current state into a `ShapeConfig`.

        Raises:
            ShapeConfigError: If no property is selected, or a class-scoped shape has
                no target class.

        """
        if not self.selected:
            raise ShapeConfigError("Select at least one property.")

        if self.topology == ShapeTopology.CLASS_SCOPED and not self.target_class:
            raise ShapeConfigError("Select a target class for a class-scoped shape.")

        return ShapeConfig(
            topology=self.topology,
            target_class=self.target_class,
            selected_properties={prop: self.entry(prop) for prop in self.selected},
        )
