"""Pytest fixtures for all tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

    from ontoshape.pydantic_models.inventory import OntologyInventory


EX_NS = "http://ex.org/"


@pytest.fixture(name="static_folder")
def static_folder_fixture() -> Path:
    """Path to the 'static' folder."""
    from pathlib import Path

    path = Path(__file__).resolve().parent / "static"

    assert path.exists()
    assert path.is_dir()

    return path


@pytest.fixture
def person_ontology_source(static_folder: Path) -> Path:
    """Path to the person ontology used in the `person_ontology` fixture."""
    return static_folder / "person.ttl"


@pytest.fixture
def person_ontology(person_ontology_source: Path) -> str:
    """The person ontology as Turtle text."""
    assert person_ontology_source.exists()
    return person_ontology_source.read_text(encoding="utf-8")


@pytest.fixture
def person_inventory() -> OntologyInventory:
    """An inventory matching the person ontology."""
    from ontoshape.pydantic_models.inventory import OntologyInventory

    return OntologyInventory(
        classes=[f"{EX_NS}Person", f"{EX_NS}Organization"],
        properties=[
            f"{EX_NS}name",
            f"{EX_NS}email",
            f"{EX_NS}worksFor",
            f"{EX_NS}knows",
            f"{EX_NS}knows",
        ],
        labels={
            EX_NS: "Person ontology",
            f"{EX_NS}Person": "Person",
            f"{EX_NS}name": "Name",
            f"{EX_NS}worksFor": "works for",
        },
    )


@pytest.fixture(autouse=True)
def _no_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a settings file from the environment does not leak into tests."""
    monkeypatch.delenv("ONTOSHAPE_SETTINGS", raising=False)
