from __future__ import annotations

import io

from rich.console import Console

from cicd_demo.app_logging import ConsoleLogger, MemoryLogger, NullLogger
from cicd_demo.application import Application


def _console(buf: io.StringIO) -> Console:
    return Console(file=buf, force_terminal=False, color_system=None, width=40)


def test_console_logger_prefixes_level() -> None:
    buf = io.StringIO()
    logger = ConsoleLogger(_console(buf))
    logger.info("hello")
    logger.warning("careful")
    logger.error("broken")
    assert buf.getvalue().splitlines() == ["INFO: hello", "WARNING: careful", "ERROR: broken"]


def test_console_logger_keeps_brackets_and_long_lines_intact() -> None:
    buf = io.StringIO()
    logger = ConsoleLogger(_console(buf))
    message = "Initializing [bold]Demo[/bold] v1.0.0 in a-very-long-environment-name-that-exceeds-width environment"
    logger.info(message)
    assert buf.getvalue() == f"INFO: {message}\n"


def test_memory_logger_filters_by_level() -> None:
    logger = MemoryLogger()
    logger.info("a")
    logger.error("b")
    assert logger.records == [("info", "a"), ("error", "b")]
    assert logger.messages("error") == ["b"]
    assert logger.messages() == ["a", "b"]


def test_null_logger_accepts_application_traffic() -> None:
    app = Application(logger=NullLogger())
    assert app.initialize() is True
    assert app.run() is True
    app.shutdown()


def test_application_defaults_to_stdout_console(capsys, monkeypatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    Application()
    out = capsys.readouterr().out
    assert "INFO: Initializing CI/CD Demo App v1.0.0 in development environment" in out
