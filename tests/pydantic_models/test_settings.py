"""Tests for `ontoshape.pydantic_models.settings`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def test_default_settings() -> None:
    """Without any source the defaults are used."""
    from ontoshape.pydantic_models.settings import load_settings

    settings = load_settings()

    assert settings.prefixes == {
        "sh": "http://www.w3.org/ns/shacl#",
        "ex": "http://example.org/",
    }
    assert settings.output_filename == "shapes.ttl"
    assert settings.media_type == "text/turtle"
    assert settings.placeholder_name == "Global"


@pytest.mark.parametrize("source_type", ["Path", "str_path", "str_yaml", "dict"])
def test_load_settings(static_folder: Path, source_type: str) -> None:
    """Settings can be loaded from a file, a YAML string or a dict."""
    import yaml

    from ontoshape.pydantic_models.settings import load_settings

    settings_file = static_folder / "settings.yaml"
    source = {
        "Path": settings_file,
        "str_path": str(settings_file),
        "str_yaml": settings_file.read_text(encoding="utf-8"),
        "dict": yaml.safe_load(settings_file.read_text(encoding="utf-8")),
    }[source_type]

    settings = load_settings(source)

    assert settings.output_filename == "person-shapes.ttl"
    assert settings.placeholder_name == "AllSubjects"
    assert settings.timeout == 5
    assert settings.prefixes == {
        "schema": "https://schema.org/",
        "sh": "http://www.w3.org/ns/shacl#",
        "ex": "http://example.org/",
    }


def test_load_settings_from_env(
    static_folder: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The `ONTOSHAPE_SETTINGS` environment variable points to a settings file."""
    from ontoshape.pydantic_models.settings import SETTINGS_ENV_VAR, load_settings

    monkeypatch.setenv(SETTINGS_ENV_VAR, str(static_folder / "settings.yaml"))

    assert load_settings().output_filename == "person-shapes.ttl"


def test_default_prefixes_can_not_be_rebound() -> None:
    """`sh` and `ex` always point to the SHACL and example namespaces."""
    from ontoshape.pydantic_models.settings import load_settings

    settings = load_settings({"prefixes": {"ex": "http://other.org/"}})

    assert settings.prefixes["ex"] == "http://example.org/"


@pytest.mark.parametrize(
    "source",
    ["timeout: -1", "- a\n- list", "prefixes: [unclosed"],
    ids=["invalid value", "not a mapping", "invalid YAML"],
)
def test_invalid_settings(source: str) -> None:
    """Invalid settings raise a `SettingsError`."""
    from ontoshape.exceptions import SettingsError
    from ontoshape.pydantic_models.settings import load_settings

    with pytest.raises(SettingsError):
        load_settings(source)


def test_missing_settings_file(tmp_path: Path) -> None:
    """A missing settings file raises a `SettingsError`."""
    from ontoshape.exceptions import SettingsError
    from ontoshape.pydantic_models.settings import load_settings

    with pytest.raises(SettingsError, match="Could not find"):
        load_settings(tmp_path / "missing.yaml")
