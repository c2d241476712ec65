"""The ParameterSet describing the subcommand to generate."""
from __future__ import annotations

import logging
import os
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = r"[A-Za-z][A-Za-z0-9]+"

# Leading whitespace is accepted for convenience; anything after the
# identifier is ignored.
_WORD_RE = re.compile(rf"\s*({IDENTIFIER_PATTERN})")
_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)

MAIN_PACKAGE = "main"
DEFAULT_USERNAME = "somebody"


def extract_identifier(line: str) -> str | None:
    """Return the identifier at the start of ``line``, or None if there is none."""
    match = _WORD_RE.match(line)
    return match.group(1) if match else None


def is_identifier(value: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(value) is not None


def export_name(command: str, package: str) -> str:
    """Capitalize ``command`` unless it lives in package main."""
    if package == MAIN_PACKAGE:
        return command
    return command[:1].upper() + command[1:]


def resolve_username() -> str:
    """Display name of the current user, used to attribute TODOs in the generated file.

    The name comes from the first comma-separated part of the account's GECOS
    field. Any failure to look it up yields ``DEFAULT_USERNAME``.
    """
    try:
        import pwd  # not available on Windows

        return pwd.getpwuid(os.getuid()).pw_gecos.split(",")[0]
    except Exception as e:
        logger.debug(f"Could not determine current user, using {DEFAULT_USERNAME!r}: {e}")
        return DEFAULT_USERNAME


class ParameterSet(BaseModel):
    """Values bound into the subcommand template.

    ``command`` and ``package`` must be identifiers. Outside package main the
    command name is exported, i.e. its first letter is upper-cased on
    construction.
    """

    model_config = ConfigDict(frozen=True)

    command: str
    package: str
    synopsis: str = ""
    usage: str = ""
    username: str = DEFAULT_USERNAME

    @model_validator(mode="before")
    @classmethod
    def _apply_export_convention(cls, data: Any) -> Any:
        if isinstance(data, dict):
            command, package = data.get("command"), data.get("package")
            if isinstance(command, str) and isinstance(package, str):
                data = {**data, "command": export_name(command, package)}
        return data

    @field_validator("command", "package")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"{value!r} is not a valid identifier")
        return value
