"""Public factory functions for creating SHACL shapes."""

from __future__ import annotations

from .shape_factory import ShapesGraph, build_shapes

__all__ = ("ShapesGraph", "build_shapes")
