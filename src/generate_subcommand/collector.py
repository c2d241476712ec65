"""Collect the generator's inputs from options or interactive prompts.

Every value that was not supplied up front is asked for on the prompter.
Interactive answers for the command and package names are validated and
re-asked until they start with an identifier; only the identifier itself is
kept. The order of the questions is fixed:

1. subcommand name (required)
2. output file, defaulting to ``<command>.go``
3. overwrite confirmation, when the output file already exists
4. package name, defaulting to the command name
5. one-line synopsis (optional)
6. multi-line usage text (optional, read until end of input)
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from generate_subcommand.config import GeneratorConfig
from generate_subcommand.exceptions import GenerationCancelled, InputClosedError
from generate_subcommand.params import (
    IDENTIFIER_PATTERN,
    ParameterSet,
    extract_identifier,
    resolve_username,
)
from generate_subcommand.prompts import Prompter

logger = logging.getLogger(__name__)

GO_SUFFIX = ".go"

# A single file name; the .go suffix is optional.
_FILE_RE = re.compile(rf"\s*({IDENTIFIER_PATTERN}(?:\.go)?)")

_YES = ("y", "yes")
_NO = ("n", "no", "")


def collect_parameters(
    config: GeneratorConfig,
    prompter: Prompter,
    username: str | None = None,
) -> tuple[ParameterSet, Path]:
    """Return the validated parameters and the path the output goes to.

    Raises:
        GenerationCancelled: the output file exists and the user declined to
            overwrite it.
        InputClosedError: input ended before a subcommand name was given.
    """
    command = config.cmd or ask_command(prompter)
    out = Path(config.out or ask_output_path(prompter, command))

    if out.exists():
        confirm_overwrite(prompter, out)

    package = config.pkg or ask_package(prompter, command)

    synopsis = config.synopsis
    if not synopsis:
        synopsis = prompter.ask("Enter one-line synopsis (optional): ") or ""

    usage = config.usage or ask_usage(prompter)

    params = ParameterSet(
        command=command,
        package=package,
        synopsis=synopsis,
        usage=usage,
        username=username if username is not None else resolve_username(),
    )
    logger.debug(f"Collected parameters for {params.command!r} in package {params.package!r}")
    return params, out


def ask_command(prompter: Prompter) -> str:
    while True:
        line = prompter.ask("Enter subcommand's name (required): ")
        if line is None:
            raise InputClosedError("Input ended before a subcommand name was entered")
        command = extract_identifier(line)
        if command:
            return command


def output_path_from(line: str, command: str) -> str | None:
    """Turn an answer to the output-file question into a path, or None if unusable."""
    if line == "":
        return command + GO_SUFFIX
    match = _FILE_RE.match(line)
    if not match:
        return None
    name = match.group(1)
    if not name.endswith(GO_SUFFIX):
        name += GO_SUFFIX
    return name


def ask_output_path(prompter: Prompter, command: str) -> str:
    while True:
        line = prompter.ask(f"Enter out file [{command}{GO_SUFFIX}]: ")
        out = output_path_from(line or "", command)
        if out:
            return out


def confirm_overwrite(prompter: Prompter, out: Path) -> None:
    """Return if the user agrees to overwrite ``out``, raise GenerationCancelled otherwise."""
    while True:
        line = prompter.ask(f'File "{out}" exists, overwrite? [y/N]: ')
        answer = (line or "").lower()
        if answer in _YES:
            return
        if answer in _NO:
            raise GenerationCancelled(out)


def ask_package(prompter: Prompter, command: str) -> str:
    while True:
        line = prompter.ask(f"Enter package name [{command}]: ")
        if not line:
            return command
        package = extract_identifier(line)
        if package:
            return package


def ask_usage(prompter: Prompter) -> str:
    line = prompter.ask("Enter usage? [y/N]: ")
    if (line or "").lower() not in _YES:
        return ""
    prompter.say("^D to end.")
    return "\n".join(prompter.read_remaining())
