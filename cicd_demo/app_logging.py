"""Leveled logging sinks injected into the Application."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.text import Text

_LEVEL_STYLES = {
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
}


class AppLogger(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleLogger:
    """Writes ``LEVEL: message`` lines to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def _emit(self, level: str, message: str) -> None:
        line = Text.assemble((f"{level.upper()}:", _LEVEL_STYLES.get(level, "")), " ", message)
        self._console.print(line, soft_wrap=True, highlight=False)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)


class MemoryLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.records if level is None or lvl == level]


class NullLogger:
    def info(self, message: str) -> None:
        del message

    def warning(self, message: str) -> None:
        del message

    def error(self, message: str) -> None:
        del message
