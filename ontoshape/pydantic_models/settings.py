"""Settings for shape generation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, Field, ValidationError
from pydantic.functional_validators import field_validator

from ontoshape.exceptions import SettingsError
from ontoshape.namespaces import DEFAULT_PREFIXES
from ontoshape.pydantic_models._utils import get_dict_from_path_or_raw

if TYPE_CHECKING:  # pragma: no cover
    from typing import Any, Optional, Union


LOGGER = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "ONTOSHAPE_SETTINGS"
"""Environment variable pointing to a YAML/JSON settings file."""


class GeneratorSettings(BaseModel):
    """Configuration of the shape generator."""

    prefixes: Annotated[
        dict[str, str],
        Field(
            description=(
                "Namespace prefixes bound in the generated Turtle. The `sh` and `ex` "
                "prefixes are always present."
            ),
        ),
    ] = dict(DEFAULT_PREFIXES)

    output_filename: Annotated[
        str, Field(description="File name used when writing the shapes document.")
    ] = "shapes.ttl"

    media_type: Annotated[
        str, Field(description="Media type of the shapes document.")
    ] = "text/turtle"

    placeholder_name: Annotated[
        str,
        Field(
            description=(
                "Local name used for the shape when there is no target class, e.g., "
                "for a global property shape."
            ),
            min_length=1,
        ),
    ] = "Global"

    timeout: Annotated[
        float,
        Field(description="Timeout in seconds when fetching an ontology URL.", gt=0),
    ] = 10

    @field_validator("prefixes", mode="after")
    @classmethod
    def ensure_default_prefixes(cls, value: dict[str, str]) -> dict[str, str]:
        """The `sh` and `ex` prefixes can not be removed or rebound."""
        return {**value, **DEFAULT_PREFIXES}


def load_settings(
    source: Optional[Union[GeneratorSettings, dict[str, Any], Path, str]] = None,
) -> GeneratorSettings:
    """Load generator settings.

    Parameters:
        source: Settings as a model, a dict, a path to a YAML/JSON file or a raw
            YAML/JSON string. If not given, the file named by the
            `ONTOSHAPE_SETTINGS` environment variable is used, falling back to the
            defaults.

    Returns:
        The validated settings.

    """
    if isinstance(source, GeneratorSettings):
        return source

    if source is None:
        source = os.getenv(SETTINGS_ENV_VAR)
        if not source:
            return GeneratorSettings()
        LOGGER.debug("Loading settings from %s=%s", SETTINGS_ENV_VAR, source)
        source = Path(source)

    if not isinstance(source, dict):
        source = get_dict_from_path_or_raw(
            source, exception_cls=SettingsError, concept_name="settings"
        )

    try:
        return GeneratorSettings(**source)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc
