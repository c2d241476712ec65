"""Pydantic model for the generator's start-up configuration."""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from generate_subcommand.exceptions import ConfigurationError
from generate_subcommand.params import is_identifier


class GeneratorConfig(BaseModel):
    """Values supplied up front; anything left empty is prompted for."""

    model_config = ConfigDict(extra='forbid')

    cmd: str = ''
    out: str = ''
    pkg: str = ''
    synopsis: str = ''
    usage: str = ''

    @field_validator('cmd', 'pkg')
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if value and not is_identifier(value):
            raise ValueError(
                f"{value!r} is not a valid identifier "
                "(a letter followed by at least one letter or digit)"
            )
        return value

    def merged_with(self, **overrides: str | None) -> GeneratorConfig:
        """Return a copy where every non-empty override replaces the stored value."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value})
        return build_config(**values)


def build_config(**values: str | None) -> GeneratorConfig:
    """Build a config from keyword values, turning validation failures into ConfigurationError."""
    try:
        return GeneratorConfig(**{key: value or '' for key, value in values.items()})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator options:\n{e}") from e


def load_and_validate_config(config_path: Path) -> GeneratorConfig:
    """Loads and validates the YAML configuration file."""
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing config file {config_path}:\n{e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    try:
        return GeneratorConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Error validating config file {config_path}:\n{e}") from e
