"""Console boundary: read a line, print text."""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Line-based text I/O consumed by the controller."""

    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return the typed line, or None at end of input."""

    def write(self, text: str) -> None:
        """Print ``text`` followed by a newline."""


class StdConsole:
    """ConsolePort over the process stdin/stdout."""

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            return None

    def write(self, text: str) -> None:
        print(text)
