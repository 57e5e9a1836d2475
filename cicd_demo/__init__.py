"""CI/CD demo application.

A small artifact for pipelines to build, test and version: a lifecycle object
guarding its ``run`` step, and a semantic-version bump helper. The command
surface is implemented with Typer and Rich, while command payload outputs
remain machine-friendly.
"""

from .app_logging import AppLogger, ConsoleLogger, MemoryLogger, NullLogger
from .application import Application
from .cli_shared import AppOptions, DemoError, InvalidStateError, UsageError
from .versioning import RELEASE_TYPES, calculate_next_version

__all__ = [
    "AppLogger",
    "AppOptions",
    "Application",
    "ConsoleLogger",
    "DemoError",
    "InvalidStateError",
    "MemoryLogger",
    "NullLogger",
    "RELEASE_TYPES",
    "UsageError",
    "__version__",
    "calculate_next_version",
]

__version__ = "0.1.0"
