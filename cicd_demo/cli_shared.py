from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any


class DemoError(Exception):
    pass


class UsageError(DemoError):
    pass


class InvalidStateError(DemoError):
    pass


CICD_DEMO_APP_NAME = "CICD_DEMO_APP_NAME"
CICD_DEMO_APP_VERSION = "CICD_DEMO_APP_VERSION"
CICD_DEMO_ENVIRONMENT = "CICD_DEMO_ENVIRONMENT"

DEFAULT_APP_NAME = "CI/CD Demo App"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT = "development"


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _print_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


@dataclass(frozen=True)
class AppOptions:
    """Identity options for an Application; blank fields take their defaults."""

    name: str | None = None
    version: str | None = None
    environment: str | None = None

    def resolved(self) -> "AppOptions":
        return AppOptions(
            name=self.name or DEFAULT_APP_NAME,
            version=self.version or DEFAULT_APP_VERSION,
            environment=self.environment or DEFAULT_ENVIRONMENT,
        )

    @classmethod
    def from_env(cls) -> "AppOptions":
        return cls(
            name=_env_or_none(CICD_DEMO_APP_NAME),
            version=_env_or_none(CICD_DEMO_APP_VERSION),
            environment=_env_or_none(CICD_DEMO_ENVIRONMENT),
        )

    def overlay(self, **overrides: str | None) -> "AppOptions":
        """Return a copy where every non-blank override replaces the current value."""

        fields = {
            "name": self.name,
            "version": self.version,
            "environment": self.environment,
        }
        for key, value in overrides.items():
            if key not in fields:
                raise UsageError(f"unknown option: {key}")
            v = (value or "").strip()
            if v:
                fields[key] = v
        return AppOptions(**fields)
