from __future__ import annotations

import io
from pathlib import Path

import pytest

from generate_subcommand.prompts import Prompter

TESTDATA = Path(__file__).resolve().parent / "testdata"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Rewrite the .golden files from the current renderer output.",
    )


@pytest.fixture(scope="session")
def testdata_dir() -> Path:
    return TESTDATA


@pytest.fixture(scope="session")
def update_golden(request: pytest.FixtureRequest) -> bool:
    return request.config.getoption("--update-golden")


@pytest.fixture
def make_prompter():
    """Build a Prompter fed from ``text``; the fixture returns (prompter, stdout)."""

    def _make(text: str = "") -> tuple[Prompter, io.StringIO]:
        stdout = io.StringIO()
        return Prompter(io.StringIO(text), stdout), stdout

    return _make
