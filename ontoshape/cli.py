"""Command line interface: generate SHACL shapes from an ontology file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ontoshape import __version__
from ontoshape.exceptions import OntoShapeError
from ontoshape.factories.shape_factory import last_segment
from ontoshape.pydantic_models._utils import is_valid_url
from ontoshape.pydantic_models.constraints import Bound
from ontoshape.session import ShaclGenerator

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from typing import Optional

    from ontoshape.pydantic_models.inventory import OntologyInventory


LOGGER = logging.getLogger(__name__)


def _key_value(text: str) -> tuple[str, str]:
    """Split `PROPERTY=VALUE` on the first `=`."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected PROPERTY=VALUE, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ontoshape",
        description="Generate SHACL shapes (Turtle) from an OWL/RDFS ontology.",
    )
    parser.add_argument(
        "ontology", help="Ontology as a Turtle file path or an http(s) URL."
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the classes and properties of the ontology and exit.",
    )
    parser.add_argument(
        "--class",
        dest="target_class",
        help="Target class, as a full IRI or its local name.",
    )
    parser.add_argument(
        "-p",
        "--property",
        dest="properties",
        action="append",
        default=[],
        metavar="PROPERTY",
        help="Property to include, as a full IRI or its local name. Repeatable.",
    )
    for option, help_text in (
        ("--min", "minCount for PROPERTY."),
        ("--max", "maxCount for PROPERTY."),
        ("--min-message", "Message for the minCount of PROPERTY."),
        ("--max-message", "Message for the maxCount of PROPERTY."),
        ("--pattern", "Regular expression (sh:pattern) for PROPERTY."),
    ):
        parser.add_argument(
            option,
            action="append",
            default=[],
            type=_key_value,
            metavar="PROPERTY=VALUE",
            help=help_text,
        )
    parser.add_argument(
        "--global",
        dest="global_shape",
        action="store_true",
        help="Generate a global property shape (sh:targetSubjectsOf).",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the shapes to this directory instead of printing them.",
    )
    parser.add_argument("--settings", help="YAML/JSON settings file.")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def resolve(name: str, candidates: Sequence[str]) -> str:
    """Resolve `name` to one of `candidates`, by full IRI or by local name."""
    if name in candidates:
        return name

    matches = list(dict.fromkeys(c for c in candidates if last_segment(c) == name))
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise OntoShapeError(f"{name!r} not found in the ontology.")
    raise OntoShapeError(f"{name!r} is ambiguous: {', '.join(matches)}")


def format_inventory(inventory: OntologyInventory) -> str:
    """Listing of classes and properties for `--list`."""
    lines = ["Classes:"]
    lines.extend(f"  {inventory.class_display_name(c)}" for c in inventory.classes)
    lines.append("Properties:")
    lines.extend(
        f"  {inventory.property_display_name(p)}" for p in inventory.properties
    )
    return "\n".join(lines)


def configure(generator: ShaclGenerator, args: argparse.Namespace) -> None:
    """Apply the command line selection to the generator's constraint model."""
    inventory = generator.inventory
    model = generator.constraints

    model.use_global_shape(args.global_shape)
    if args.target_class:
        model.target_class = resolve(args.target_class, inventory.classes)

    for name in args.properties:
        prop = resolve(name, inventory.properties)
        if prop not in model.selected:
            model.toggle_selection(prop)

    for values, setter, bound in (
        (args.min, model.set_cardinality, Bound.MIN),
        (args.max, model.set_cardinality, Bound.MAX),
        (args.min_message, model.set_message, Bound.MIN),
        (args.max_message, model.set_message, Bound.MAX),
    ):
        for name, value in values:
            setter(resolve(name, inventory.properties), bound, value)

    for name, value in args.pattern:
        model.set_pattern(resolve(name, inventory.properties), value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        generator = ShaclGenerator(Path(args.settings) if args.settings else None)
        generator.load(
            args.ontology if is_valid_url(args.ontology) else Path(args.ontology)
        )
        inventory = generator.parse()

        if args.list:
            print(format_inventory(inventory))
            return 0

        configure(generator, args)
        output = generator.generate()

        if args.output:
            path = generator.download(args.output)
            print(path)
        else:
            print(output)
    except OntoShapeError as exc:
        LOGGER.debug("Failed.", exc_info=exc)
        print(f"ontoshape: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
