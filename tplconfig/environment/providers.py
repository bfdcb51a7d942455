"""Read-only snapshot providers for process-wide key/value state."""

from __future__ import annotations

import os
from typing import Protocol

from . import properties


class BindingsProvider(Protocol):
    def get(self) -> dict[str, str]: ...


class EnvironmentProvider:
    """Exposes the process environment."""

    def get(self) -> dict[str, str]:
        return dict(os.environ)


class SystemPropertiesProvider:
    """Exposes the system properties store."""

    def get(self) -> dict[str, str]:
        return properties.snapshot()
