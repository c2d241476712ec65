"""Typer-powered CLI for generate-subcommand.

The single command writes a Go source file containing a type which satisfies
the ``subcommands.Command`` interface of github.com/google/subcommands.

Options:
- `-cmd` (str): Name of the subcommand.
- `-out` (str): Output file.
- `-pkg` (str): Name of the package.
- `-synopsis` (str): Synopsis of the subcommand.
- `-usage` (str): Usage example of the subcommand.
- `--config`, `-c` (Path, optional): YAML file holding values for the options above.
- `--log-level` (str): Logging level (default: "INFO").
- `--log-file` (Path, optional): Also write log records to this file.

Every option may also be spelled with two dashes. Values that are not given
as options (or in the config file) are prompted for on standard input.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from generate_subcommand import __version__
from generate_subcommand.collector import collect_parameters
from generate_subcommand.config import GeneratorConfig, load_and_validate_config
from generate_subcommand.exceptions import GenerationCancelled, SubcommandGeneratorError
from generate_subcommand.log_config import setup_logging
from generate_subcommand.prompts import Prompter
from generate_subcommand.renderer import generate

app = typer.Typer(add_completion=False)
logger = logging.getLogger("generate_subcommand")


def _version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def main(
    cmd: str = typer.Option("", "-cmd", "--cmd", help="Name of the subcommand"),
    out: str = typer.Option("", "-out", "--out", help="Output file"),
    pkg: str = typer.Option("", "-pkg", "--pkg", help="Name of the package"),
    synopsis: str = typer.Option("", "-synopsis", "--synopsis", help="Synopsis of the subcommand"),
    usage: str = typer.Option("", "-usage", "--usage", help="Usage example of the subcommand"),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML file with values for the options above"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """A code generator for subcommands.

    The resulting file will contain a type which satisfies the
    subcommands.Command interface. See https://godoc.org/github.com/google/subcommands.

    The command accepts all parameters in the form of flags; however, flags
    that have not been specified will be prompted for. Not all inputs are
    required.
    """
    try:
        setup_logging(log_level, log_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e

    try:
        base = load_and_validate_config(config) if config else GeneratorConfig()
        cfg = base.merged_with(cmd=cmd, out=out, pkg=pkg, synopsis=synopsis, usage=usage)
        params, out_path = collect_parameters(cfg, Prompter(sys.stdin, sys.stdout))
        generate(params, out_path)
    except GenerationCancelled as e:
        logger.info(f"{e}")
        raise typer.Exit(0)
    except SubcommandGeneratorError as e:
        logger.error(f"{e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
