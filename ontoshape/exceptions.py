"""ontoshape exceptions."""

from __future__ import annotations


class OntoShapeError(Exception):
    """Base class for all ontoshape exceptions."""


class OntologyError(OntoShapeError):
    """Base class for all ontology loading/parsing exceptions."""


class ParseError(OntologyError, ValueError):
    """Raised when the ontology text is not valid Turtle."""


class OntologyNotFound(OntologyError, FileNotFoundError):
    """Raised when an ontology source is or can not be found."""


class ShapeError(OntoShapeError):
    """Base class for all shape generation exceptions."""


class ShapeConfigError(ShapeError, ValueError):
    """Raised when the shape configuration is incomplete, e.g., no target class."""


class InvalidConstraint(ShapeError, ValueError):
    """Raised when a constraint value can not be used, e.g., a non-numeric count."""


class SerializationError(ShapeError):
    """Raised when the shapes graph could not be serialized."""


class SettingsError(OntoShapeError, ValueError):
    """Raised when the generator settings can not be loaded or are invalid."""
