"""Domain models for configuration template rendering."""

from __future__ import annotations

import codecs
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoIncludePath(BaseModel):
    """Templates are rendered standalone; includes cannot be resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class ResourceIncludePath(BaseModel):
    """Resolve includes from a directory shipped inside an importable package."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resource"] = "resource"
    package: str = Field(..., min_length=1, description="Importable package name")
    path: str = Field(default="templates", description="Directory inside the package")

    @field_validator("path")
    @classmethod
    def _strip_leading_slash(cls, value: str) -> str:
        return value.lstrip("/")

    @classmethod
    def parse(cls, value: str) -> ResourceIncludePath:
        """Parse ``PACKAGE[:DIRECTORY]`` into a resource include path."""
        package, _, path = value.partition(":")
        if not package:
            raise ValueError(f"Must be PACKAGE[:DIRECTORY], got: {value!r}")
        if path:
            return cls(package=package, path=path)
        return cls(package=package)


class FileIncludePath(BaseModel):
    """Resolve includes from a filesystem directory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    directory: Path = Field(..., description="Template search directory")


IncludePath = Annotated[
    NoIncludePath | ResourceIncludePath | FileIncludePath,
    Field(discriminator="kind"),
]

DataModelFactory = Callable[[], Any]


class RenderConfiguration(BaseModel):
    """Settings for rendering configuration templates.

    Built once and shared by every lookup. ``data_model_factory`` is called
    on each render and must return a mapping, pydantic model,
    dataclass or plain object of bindings, never ``None``.
    """

    model_config = ConfigDict(frozen=True)

    charset: str = Field(default="utf-8", description="Template and output encoding")
    include_path: IncludePath = Field(default_factory=NoIncludePath)
    output_path: Path | None = Field(
        default=None, description="Where to persist the rendered document"
    )
    data_model_factory: DataModelFactory = Field(
        default=dict, description="Produces caller bindings per render"
    )
    variable_start: str = Field(default="${", min_length=1)
    variable_end: str = Field(default="}", min_length=1)

    @field_validator("charset")
    @classmethod
    def _known_charset(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"Unknown charset: {value!r}") from e
