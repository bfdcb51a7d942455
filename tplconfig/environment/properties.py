"""Process-wide system properties store.

A mutable key/value registry for settings that are not environment
variables, e.g. values passed as ``--define KEY=VALUE`` on a command line.
A handful of read-only defaults describing the running interpreter are
always present; explicitly set properties take precedence over them.
"""

from __future__ import annotations

import locale
import logging
import os
import platform

logger = logging.getLogger(__name__)

_properties: dict[str, str] = {}


def _defaults() -> dict[str, str]:
    return {
        "os.name": platform.system(),
        "os.arch": platform.machine(),
        "python.version": platform.python_version(),
        "user.dir": os.getcwd(),
        "user.home": os.path.expanduser("~"),
        "file.encoding": locale.getpreferredencoding(False),
        "line.separator": os.linesep,
    }


def get_property(key: str, default: str | None = None) -> str | None:
    """Return a property value, falling back to ``default`` when unset."""
    return snapshot().get(key, default)


def set_property(key: str, value: str) -> str | None:
    """Set a property and return its previous explicitly set value."""
    previous = _properties.get(key)
    _properties[key] = value
    logger.debug(f"Set system property: {key}")
    return previous


def clear_property(key: str) -> str | None:
    """Remove an explicitly set property and return its value."""
    return _properties.pop(key, None)


def snapshot() -> dict[str, str]:
    """Return a copy of all properties, defaults included."""
    merged = _defaults()
    merged.update(_properties)
    return merged


def clear_properties() -> None:
    """Remove every explicitly set property, leaving the defaults."""
    _properties.clear()
