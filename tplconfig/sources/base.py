"""Base configuration source lookups."""

from __future__ import annotations

import io
import logging
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Protocol

from ..core.errors import SourceNotFoundError

logger = logging.getLogger(__name__)


class ConfigurationSourceProvider(Protocol):
    """Resolves a logical configuration path to a byte stream."""

    def open(self, path: str) -> BinaryIO: ...


class FileConfigurationSourceProvider:
    """Reads configuration documents from the filesystem."""

    def open(self, path: str) -> BinaryIO:
        file_path = Path(path)
        if not file_path.is_file():
            raise SourceNotFoundError(path)
        logger.debug(f"Opening configuration file: {file_path}")
        return file_path.open("rb")


class ResourceConfigurationSourceProvider:
    """Reads configuration documents shipped inside a package."""

    def __init__(self, package: str) -> None:
        self.package = package

    def open(self, path: str) -> BinaryIO:
        try:
            resource = resources.files(self.package).joinpath(path.lstrip("/"))
        except ModuleNotFoundError as e:
            raise SourceNotFoundError(
                path, f"Configuration package not found: {self.package}"
            ) from e
        if not resource.is_file():
            raise SourceNotFoundError(path, f"Configuration resource not found: {path}")
        logger.debug(f"Opening configuration resource: {self.package}:{path}")
        return io.BytesIO(resource.read_bytes())
