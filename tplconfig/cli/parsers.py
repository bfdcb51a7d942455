"""CLI argument parsers and validators."""

from __future__ import annotations

import codecs
from pathlib import Path

import typer

from ..core.models import (
    FileIncludePath,
    IncludePath,
    ResourceIncludePath,
)


def parse_define(value: str) -> tuple[str, str]:
    """Parse a property definition in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, prop = value.split("=", 1)
    if not key:
        raise typer.BadParameter(f"Property name is empty: {value!r}")
    return key, prop


def parse_charset(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError as e:
        raise typer.BadParameter(f"Unknown charset: {value!r}") from e


def parse_include_path(
    include_dir: str, include_resource: str, default: IncludePath
) -> IncludePath:
    """Pick the include path from CLI options, falling back to ``default``."""
    if include_dir and include_resource:
        raise typer.BadParameter(
            "--include-dir and --include-resource are mutually exclusive"
        )
    if include_resource:
        try:
            return ResourceIncludePath.parse(include_resource)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
    if include_dir:
        return FileIncludePath(directory=Path(include_dir))
    return default
