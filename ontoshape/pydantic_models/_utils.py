"""Utility functions for loading ontologies and settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import yaml
from pydantic import AnyUrl, ValidationError

from ontoshape.exceptions import OntologyNotFound, OntoShapeError

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any


LOGGER = logging.getLogger(__name__)

TURTLE_ACCEPT = "text/turtle, application/x-turtle;q=0.9, */*;q=0.1"


def is_valid_url(url: str | AnyUrl) -> bool:
    """Check if the URL is valid."""
    try:
        url = AnyUrl(str(url))
    except ValidationError:
        return False

    return not any(getattr(url, url_part) is None for url_part in ["scheme", "host"])


def _existing_path(source: str | Path) -> Path | None:
    """Return `source` as a resolved path if it points to an existing file."""
    if isinstance(source, str) and ("\n" in source or not source.strip()):
        return None

    try:
        path = Path(source).resolve()
        return path if path.is_file() else None
    except (OSError, ValueError):
        # Too long or otherwise not a valid path name for this OS.
        return None


def try_load_from_json_yaml(
    source: str,
    exception_cls: type[OntoShapeError] | None = None,
    exception_msg: str | None = None,
) -> dict[Any, Any]:
    """Try to load a dict from a JSON/YAML string."""
    if exception_cls is None:
        exception_cls = OntoShapeError

    if exception_msg is None:
        exception_msg = "Could not parse the string. Expecting a YAML/JSON format."

    # JSON is a subset of YAML.
    try:
        res = yaml.safe_load(source)
    except yaml.YAMLError as error:
        raise exception_cls(exception_msg) from error

    if res is None:
        return {}

    if not isinstance(res, dict):
        raise exception_cls(f"{exception_msg} Expected a mapping, got {type(res)}.")

    return res


def try_load_from_url(
    source: AnyUrl | str,
    exception_cls: type[OntoShapeError] | None = None,
    exception_msg: str | None = None,
    accept: str = TURTLE_ACCEPT,
    timeout: float = 10,
) -> str:
    """Try to retrieve text content from a URL."""
    if exception_cls is None:
        exception_cls = OntologyNotFound

    if exception_msg is None:
        exception_msg = f"Could not retrieve content online from {source}"

    with httpx.Client(follow_redirects=True, timeout=timeout) as client:
        try:
            response = client.get(
                str(source), headers={"Accept": accept}
            ).raise_for_status()
        except httpx.HTTPError as error:
            raise exception_cls(exception_msg) from error

    LOGGER.debug("Retrieved %d characters from %s", len(response.text), source)
    return response.text


def load_ontology_text(
    source: AnyUrl | Path | str | bytes | bytearray,
    *,
    timeout: float = 10,
) -> str:
    """Get ontology text from a URL, path or a raw Turtle string.

    Parameters:
        source: An http(s) URL, a path to a file, or the Turtle text itself. Bytes
            are decoded as UTF-8.
        timeout: Timeout in seconds when fetching from a URL.

    Returns:
        The ontology as text. It is not parsed here.

    Raises:
        OntologyNotFound: If a path does not exist, a URL can not be retrieved, or a
            file is not valid UTF-8.

    """
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise OntologyNotFound("Ontology content is not valid UTF-8.") from exc

    if isinstance(source, Path):
        path = _existing_path(source)
        if path is None:
            raise OntologyNotFound(f"Could not find ontology file at {source}")
        return _read_text(path)

    if is_valid_url(source):
        return try_load_from_url(
            source,
            exception_msg=f"Could not retrieve ontology online from {source}",
            timeout=timeout,
        )

    if not isinstance(source, str):
        raise TypeError(
            f"Expected source to be a str at this point, instead got {type(source)}."
        )

    path = _existing_path(source)
    if path is not None:
        return _read_text(path)

    # Otherwise, assume it's the Turtle text itself.
    return source


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise OntologyNotFound(f"Ontology file {path} is not valid UTF-8.") from exc


def get_dict_from_path_or_raw(
    source: Path | str,
    *,
    exception_cls: type[OntoShapeError] | None = None,
    concept_name: str | None = None,
) -> dict[Any, Any]:
    """Get a dictionary from a path or a raw JSON/YAML string."""
    if exception_cls is None:
        exception_cls = OntoShapeError

    if concept_name is None:
        concept_name = "source"

    path = _existing_path(source)
    if path is not None:
        return try_load_from_json_yaml(
            path.read_text(encoding="utf-8"),
            exception_cls=exception_cls,
            exception_msg=(
                f"Could not parse {concept_name} from {path} (expecting a JSON/YAML "
                "format)."
            ),
        )

    if isinstance(source, Path):
        raise exception_cls(f"Could not find {concept_name} JSON/YAML file at {source}")

    return try_load_from_json_yaml(
        source,
        exception_cls=exception_cls,
        exception_msg=(
            f"Could not parse the {concept_name} string (expecting a JSON/YAML "
            "format)."
        ),
    )
