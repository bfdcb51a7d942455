"""Environment-driven settings for the template configuration bundle."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import (
    DataModelFactory,
    FileIncludePath,
    IncludePath,
    NoIncludePath,
    RenderConfiguration,
    ResourceIncludePath,
)


class BundleSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TPLCONFIG_", case_sensitive=False)

    charset: str = "utf-8"
    resource_include_path: str | None = None
    file_include_path: Path | None = None
    output_path: Path | None = None

    @field_validator("resource_include_path")
    @classmethod
    def _resource_include_path_format(cls, value: str | None) -> str | None:
        if value:
            ResourceIncludePath.parse(value)
        return value

    @model_validator(mode="after")
    def _single_include_path(self) -> BundleSettings:
        if self.resource_include_path and self.file_include_path:
            raise ValueError(
                "resource_include_path and file_include_path are mutually exclusive"
            )
        return self

    def include_path(self) -> IncludePath:
        if self.resource_include_path:
            return ResourceIncludePath.parse(self.resource_include_path)
        if self.file_include_path:
            return FileIncludePath(directory=self.file_include_path)
        return NoIncludePath()

    def to_render_configuration(
        self, data_model_factory: DataModelFactory = dict
    ) -> RenderConfiguration:
        return RenderConfiguration(
            charset=self.charset,
            include_path=self.include_path(),
            output_path=self.output_path,
            data_model_factory=data_model_factory,
        )
