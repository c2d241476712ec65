"""Render a ParameterSet into the subcommand source file."""
from __future__ import annotations

import difflib
import logging
import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from generate_subcommand.exceptions import FileOperationError, RenderError
from generate_subcommand.params import ParameterSet

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
SUBCOMMAND_TEMPLATE = "subcommand.go.j2"

OUTPUT_MODE = 0o644


def first_char(value: str) -> str:
    """First character of ``value``; empty for an empty string."""
    return value[:1]


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.filters["first_char"] = first_char
    return env


_env = _build_environment()


def render(params: ParameterSet, template: str = SUBCOMMAND_TEMPLATE) -> str:
    """Render ``params`` into the named template.

    Rendering has no side effects, so the same parameters always produce the
    same text.

    Raises:
        RenderError: the template could not be loaded or executed.
    """
    try:
        return _env.get_template(template).render(**params.model_dump())
    except TemplateError as e:
        raise RenderError(f"Failed to render {template}: {e}") from e


def write_output(content: str, path: Path) -> None:
    """Write ``content`` to ``path``, creating or truncating it."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(content.encode("utf-8"))
    except OSError as e:
        raise FileOperationError(f"Failed to write {path}: {e}") from e


def generate(params: ParameterSet, out: Path) -> str:
    """Render ``params`` and write the result to ``out``.

    The whole file is rendered before ``out`` is opened, so a render failure
    never leaves a partial file behind.
    """
    content = render(params)
    write_output(content, out)
    logger.info(f"Wrote {params.command}Cmd to {out}")
    return content


def diff_against(got: str, want: str, label: str = "") -> str:
    """Unified diff (-got +want) of rendered output against a reference; empty when identical."""
    if got == want:
        return ""
    return "".join(
        difflib.unified_diff(
            got.splitlines(keepends=True),
            want.splitlines(keepends=True),
            fromfile=f"{label} (got)",
            tofile=f"{label} (want)",
        )
    )
