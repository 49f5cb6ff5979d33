"""Pydantic data model for the inventory extracted from an ontology."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class OntologyInventory(BaseModel):
    """Classes, properties and labels found in an ontology."""

    classes: Annotated[
        list[str],
        Field(
            description=(
                "IRIs asserted `rdf:type owl:Class`, in first-seen order and without "
                "duplicates."
            ),
        ),
    ] = []

    properties: Annotated[
        list[str],
        Field(
            description=(
                "IRIs with an `rdf:type` whose IRI contains the text 'Property'. One "
                "entry per matching type assertion, so an IRI may be listed more than "
                "once."
            ),
        ),
    ] = []

    labels: Annotated[
        dict[str, str],
        Field(
            description=(
                "Display labels from `rdfs:label`. The last label seen for a subject "
                "wins."
            ),
        ),
    ] = {}

    def label(self, iri: str) -> str | None:
        """Return the label of `iri`, if any."""
        return self.labels.get(str(iri))

    def class_display_name(self, iri: str) -> str:
        """Listing name of a class: `iri (label)`, or the bare IRI."""
        label = self.label(iri)
        return f"{iri} ({label})" if label else str(iri)

    def property_display_name(self, iri: str) -> str:
        """Listing name of a property: `label (iri)`, or the bare IRI."""
        label = self.label(iri)
        return f"{label} ({iri})" if label else str(iri)
