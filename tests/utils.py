from __future__ import annotations

from typing import Iterable, List

from writing_helper.config import AnalyzerConfig
from writing_helper.console import Console
from writing_helper.session import run_session


class ScriptedConsole(Console):
    """Replays canned input lines and records everything written."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending: List[str] = list(lines)
        self._buffer: List[str] = []

    def read_line(self) -> str | None:
        if not self._pending:
            return None
        return self._pending.pop(0)

    def write(self, text: str = "", *, newline: bool = True) -> None:
        self._buffer.append(text + ("\n" if newline else ""))

    @property
    def output(self) -> str:
        return "".join(self._buffer)


def fast_config() -> AnalyzerConfig:
    """Default configuration with progress pacing disabled."""
    return AnalyzerConfig(progress_delay=0.0)


def run_scripted(lines: list[str]) -> tuple[int, str]:
    """Drive one interactive session with canned input; return (exit code, output)."""
    console = ScriptedConsole(lines)
    exit_code = run_session(console, fast_config())
    return exit_code, console.output
