"""Application lifecycle: Uninitialized <-> Ready, with a guarded run step."""

from __future__ import annotations

from typing import Any

from .app_logging import AppLogger, ConsoleLogger
from .cli_shared import AppOptions, InvalidStateError

NOT_INITIALIZED_MESSAGE = "Application must be initialized before running"


class Application:
    """Main application object.

    Identity fields are fixed at construction. ``initialized`` only changes
    through ``initialize()`` and ``shutdown()``.
    """

    def __init__(self, options: AppOptions | None = None, *, logger: AppLogger | None = None) -> None:
        resolved = (options or AppOptions()).resolved()
        self._name = str(resolved.name)
        self._version = str(resolved.version)
        self._environment = str(resolved.environment)
        self._initialized = False
        self._logger: AppLogger = logger if logger is not None else ConsoleLogger()

        self._logger.info(
            f"Initializing {self._name} v{self._version} in {self._environment} environment"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self._version

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        self._logger.info("Application initializing...")
        self._initialized = True
        self._logger.info("Application initialized successfully!")
        return self._initialized

    def run(self) -> bool:
        if not self._initialized:
            raise InvalidStateError(NOT_INITIALIZED_MESSAGE)

        self._logger.info("Application running...")
        return True

    def shutdown(self) -> None:
        self._logger.info("Application shutting down...")
        self._initialized = False
        self._logger.info("Application has been shut down")

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "version": self._version,
            "environment": self._environment,
            "initialized": self._initialized,
        }

    def __repr__(self) -> str:
        return (
            f"Application(name={self._name!r}, version={self._version!r}, "
            f"environment={self._environment!r}, initialized={self._initialized})"
        )
