"""Tests for `ontoshape.pydantic_models._utils`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

    from pytest_httpx import HTTPXMock


ONTOLOGY_URL = "https://ontologies.example.org/person.ttl"


@pytest.mark.parametrize("source_type", ["Path", "str_path", "str_raw", "bytes"])
def test_load_ontology_text(
    person_ontology_source: Path, person_ontology: str, source_type: str
) -> None:
    """Ontology text is read from paths, or taken as-is."""
    from ontoshape.pydantic_models._utils import load_ontology_text

    source = {
        "Path": person_ontology_source,
        "str_path": str(person_ontology_source),
        "str_raw": person_ontology,
        "bytes": person_ontology.encode("utf-8"),
    }[source_type]

    assert load_ontology_text(source) == person_ontology


def test_load_ontology_text_from_url(
    person_ontology: str, httpx_mock: HTTPXMock
) -> None:
    """Ontology text is fetched from http(s) URLs."""
    from ontoshape.pydantic_models._utils import load_ontology_text

    httpx_mock.add_response(url=ONTOLOGY_URL, text=person_ontology)

    assert load_ontology_text(ONTOLOGY_URL) == person_ontology

    request = httpx_mock.get_request()
    assert request is not None
    assert "text/turtle" in request.headers["Accept"]


def test_load_ontology_text_url_error(httpx_mock: HTTPXMock) -> None:
    """A failing request raises `OntologyNotFound`."""
    from ontoshape.exceptions import OntologyNotFound
    from ontoshape.pydantic_models._utils import load_ontology_text

    httpx_mock.add_response(url=ONTOLOGY_URL, status_code=404)

    with pytest.raises(OntologyNotFound, match="Could not retrieve"):
        load_ontology_text(ONTOLOGY_URL)


def test_load_ontology_text_missing_file(tmp_path: Path) -> None:
    """A missing file raises `OntologyNotFound`."""
    from ontoshape.exceptions import OntologyNotFound
    from ontoshape.pydantic_models._utils import load_ontology_text

    with pytest.raises(OntologyNotFound):
        load_ontology_text(tmp_path / "missing.ttl")

    # `OntologyNotFound` is also a `FileNotFoundError`.
    with pytest.raises(FileNotFoundError):
        load_ontology_text(tmp_path / "missing.ttl")


def test_load_ontology_text_invalid_utf8(tmp_path: Path) -> None:
    """Files must be UTF-8 encoded."""
    from ontoshape.exceptions import OntologyNotFound
    from ontoshape.pydantic_models._utils import load_ontology_text

    ontology = tmp_path / "latin1.ttl"
    ontology.write_bytes('"Fran\xe7ais"'.encode("latin-1"))

    with pytest.raises(OntologyNotFound, match="UTF-8"):
        load_ontology_text(ontology)

    with pytest.raises(OntologyNotFound, match="UTF-8"):
        load_ontology_text(ontology.read_bytes())


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.org/onto.ttl", True),
        ("http://localhost:8000/onto", True),
        ("onto.ttl", False),
        ("@prefix ex: <http://ex.org/> .", False),
    ],
)
def test_is_valid_url(url: str, expected: bool) -> None:
    """Only URLs with a scheme and a host are considered URLs."""
    from ontoshape.pydantic_models._utils import is_valid_url

    assert is_valid_url(url) is expected
