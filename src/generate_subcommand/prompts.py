"""Line-oriented prompting over plain text streams."""
from __future__ import annotations

from typing import TextIO

import typer


class Prompter:
    """Ask questions on ``stdout`` and read the answers from ``stdin``.

    Answers are read one line at a time, so the collector can be driven by
    any text stream (a terminal, a pipe or an ``io.StringIO`` in tests).
    """

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.stdin = stdin
        self.stdout = stdout

    def ask(self, message: str) -> str | None:
        """Print ``message`` and return the next line, or None at end of input."""
        typer.echo(message, nl=False, file=self.stdout)
        return self._readline()

    def say(self, message: str) -> None:
        typer.echo(message, file=self.stdout)

    def read_remaining(self) -> list[str]:
        """Read lines until end of input."""
        lines = []
        while True:
            line = self._readline()
            if line is None:
                return lines
            lines.append(line)

    def _readline(self) -> str | None:
        line = self.stdin.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line
