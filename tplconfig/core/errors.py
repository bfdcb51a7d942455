"""Exceptions raised while turning a configuration template into a document."""

from __future__ import annotations

from pathlib import Path


class SourceNotFoundError(FileNotFoundError):
    """Raised by a base source provider when a configuration path does not exist."""

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Configuration source not found: {path}")
        self.path = path


class TemplateConfigError(Exception):
    """Base class for template configuration failures."""


class TemplateRenderError(TemplateConfigError):
    """Raised when a configuration template cannot be parsed or rendered."""

    def __init__(self, message: str = "Could not render template.") -> None:
        super().__init__(message)


class OutputWriteError(TemplateConfigError):
    """Raised when the rendered configuration cannot be written to disk."""

    def __init__(
        self, path: Path, message: str = "Could not write configuration file."
    ) -> None:
        super().__init__(f"{message} ({path})")
        self.path = path


class MissingDataModelError(TemplateConfigError):
    """Raised when the data-model factory returns no bindings."""


class IncludePathError(TemplateConfigError):
    """Raised when the configured include path cannot be used for template loading."""


class InvalidDataModelError(TemplateConfigError):
    """Raised when the data-model factory returns a value without named bindings."""
