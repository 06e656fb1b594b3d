"""Application settings model for the ``[b5kata]`` configuration section.

Provides the KataConfig Pydantic model for validated, immutable settings and
the loader function to create it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from b5kata.domain.enums import OutputFormat
from b5kata.domain.errors import ConfigurationError


class KataConfig(BaseModel):
    """Validated, immutable application settings.

    Example:
        >>> KataConfig().output_format
        <OutputFormat.HUMAN: 'human'>
        >>> KataConfig.model_validate({"output_format": "JSON"}).output_format
        <OutputFormat.JSON: 'json'>
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    output_format: OutputFormat = OutputFormat.HUMAN

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalise_format(cls, v: Any) -> Any:
        """Accept format names case-insensitively; blank means the default.

        Examples:
            >>> KataConfig._normalise_format(" Json ")
            'json'
            >>> KataConfig._normalise_format("")
            'human'
        """
        if isinstance(v, str):
            stripped = v.strip().lower()
            return stripped or OutputFormat.HUMAN.value
        return v


def load_kata_config_from_dict(config_dict: Mapping[str, Any]) -> KataConfig:
    """Build KataConfig from the full configuration mapping.

    Args:
        config_dict: Configuration as returned by ``Config.as_dict()``. Only
            the ``b5kata`` section is read; a missing section yields defaults.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: If the section holds invalid values.

    Example:
        >>> load_kata_config_from_dict({"b5kata": {"output_format": "json"}}).output_format.value
        'json'
        >>> load_kata_config_from_dict({}).output_format.value
        'human'
    """
    raw = config_dict.get("b5kata", {})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[b5kata] must be a table, got {type(raw).__name__}")
    try:
        return KataConfig.model_validate(dict(cast("Mapping[str, Any]", raw)))
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(f"Invalid b5kata.{location}: {first['msg']}") from exc


__all__ = ["KataConfig", "load_kata_config_from_dict"]
