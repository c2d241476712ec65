"""generate-subcommand: A code generator for subcommands."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("generate-subcommand")
except PackageNotFoundError:
    __version__ = "unknown"

__author__ = "generate-subcommand developers"

from .params import ParameterSet
from .renderer import render
