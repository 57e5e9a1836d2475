from __future__ import annotations

import sys

import click
import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.text import Text

from . import __version__
from .app_logging import AppLogger, ConsoleLogger, NullLogger
from .application import Application
from .cli_shared import AppOptions, DemoError, _print_json
from .versioning import RELEASE_TYPES, calculate_next_version

app = typer.Typer(
    name="cicd-demo",
    help="Demo artifact for CI/CD pipelines: lifecycle smoke run and version bumps.",
    no_args_is_help=True,
    add_completion=False,
)

_ERROR_CONSOLE = Console(stderr=True)

# Newer typer releases vendor click; their exceptions do not subclass click's.
_typer_click = getattr(typer, "_click", None)
_CLICK_ERRORS: tuple[type[Exception], ...] = (click.ClickException,)
if _typer_click is not None:
    _CLICK_ERRORS += (_typer_click.exceptions.ClickException,)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(Text.assemble(("error:", "bold red"), " ", msg), soft_wrap=True, highlight=False)


def _bootstrap_env() -> None:
    # Discover .env from the working directory (pipelines run from the repo
    # root) without overriding already-exported process environment values.
    load_dotenv(find_dotenv(usecwd=True))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cicd-demo {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version


@app.command("next-version", help="Print the version that follows VERSION for RELEASE_TYPE.")
def next_version(
    version: str = typer.Argument(..., help="Current semantic version, e.g. 1.2.3"),
    release_type: str = typer.Argument(..., help=f"Release type: {', '.join(RELEASE_TYPES)}"),
    json_output: bool = typer.Option(False, "--json", help="Emit compact JSON output"),
) -> None:
    nxt = calculate_next_version(version, release_type)
    if json_output:
        _print_json(
            {
                "kind": "cicd-demo.next-version.v1",
                "current": version,
                "releaseType": release_type,
                "next": nxt,
            }
        )
        return
    typer.echo(nxt)


@app.command("lifecycle", help="Initialize, run and shut down the demo application.")
def lifecycle(
    name: str = typer.Option("", "--name", help="Application display name"),
    app_version: str = typer.Option("", "--app-version", help="Application version"),
    environment: str = typer.Option("", "--environment", help="Environment label"),
    skip_initialize: bool = typer.Option(
        False, "--skip-initialize", help="Call run without initializing first"
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress lifecycle log lines"),
) -> None:
    options = AppOptions.from_env().overlay(
        name=name,
        version=app_version,
        environment=environment,
    )
    logger: AppLogger = NullLogger() if quiet else ConsoleLogger(Console(stderr=True))
    application = Application(options, logger=logger)

    if not skip_initialize:
        application.initialize()
    ran = application.run()
    application.shutdown()

    _print_json(
        {
            "kind": "cicd-demo.lifecycle.v1",
            "app": application.to_payload(),
            "ran": ran,
        }
    )


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="cicd-demo", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _CLICK_ERRORS as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except DemoError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
