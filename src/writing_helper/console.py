from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import IO, Iterable

import typer


class Console(ABC):
    """Line-oriented reader/writer used by the interactive session."""

    @abstractmethod
    def read_line(self) -> str | None:
        """Return the next input line without its newline, or None at end of input."""
        raise NotImplementedError

    @abstractmethod
    def write(self, text: str = "", *, newline: bool = True) -> None:
        """Emit text, followed by a newline unless disabled."""
        raise NotImplementedError

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)


class StreamConsole(Console):
    """
    Console over text streams. When no streams are given, sys.stdin and
    sys.stdout are looked up on every call so swapped streams are honoured.
    """

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self) -> str | None:
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def write(self, text: str = "", *, newline: bool = True) -> None:
        typer.echo(text, file=self._stdout, nl=newline)

