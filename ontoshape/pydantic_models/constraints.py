"""Pydantic data models for user-editable property constraints."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from ontoshape.exceptions import InvalidConstraint


class Bound(str, Enum):
    """Which side of a cardinality constraint."""

    MIN = "min"
    MAX = "max"

    @property
    def count_field(self) -> str:
        """Name of the `ConstraintEntry` count field for this bound."""
        return f"{self.value}_count"

    @property
    def message_field(self) -> str:
        """Name of the `ConstraintEntry` message field for this bound."""
        return f"{self.value}_message"


class ConstraintEntry(BaseModel):
    """Constraints for a single property.

    Counts are kept as the raw text the user entered. They are only turned into
    integers when a shape is built, see `count()`.
    """

    min_count: Annotated[
        Optional[str], Field(description="Raw text for `sh:minCount`.")
    ] = None
    max_count: Annotated[
        Optional[str], Field(description="Raw text for `sh:maxCount`.")
    ] = None
    min_message: Annotated[
        Optional[str],
        Field(description="`sh:message` added together with `sh:minCount`."),
    ] = None
    max_message: Annotated[
        Optional[str],
        Field(description="`sh:message` added together with `sh:maxCount`."),
    ] = None
    pattern: Annotated[
        Optional[str],
        Field(description="Regular expression emitted verbatim as `sh:pattern`."),
    ] = None

    def count(self, bound: Bound) -> int | None:
        """Return the cardinality for `bound` as an integer.

        Returns:
            The count, or `None` if nothing (or only whitespace) was entered.

        Raises:
            InvalidConstraint: If the text is not a non-negative integer.

        """
        bound = Bound(bound)
        raw = getattr(self, bound.count_field)
        if raw is None or not str(raw).strip():
            return None

        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise InvalidConstraint(
                f"{bound.value}Count must be a non-negative integer, got {raw!r}."
            ) from exc

        if value < 0:
            raise InvalidConstraint(
                f"{bound.value}Count must be a non-negative integer, got {raw!r}."
            )
        return value

    def message(self, bound: Bound) -> str | None:
        """Return the violation message for `bound`, if any."""
        return getattr(self, Bound(bound).message_field) or None
