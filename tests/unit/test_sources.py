from __future__ import annotations

from pathlib import Path

import pytest

from tplconfig.core.errors import SourceNotFoundError
from tplconfig.sources.base import (
    FileConfigurationSourceProvider,
    ResourceConfigurationSourceProvider,
)


class TestFileConfigurationSourceProvider:
    def test_reads_file_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_bytes(b"a: 1\n")

        with FileConfigurationSourceProvider().open(str(path)) as source:
            assert source.read() == b"a: 1\n"

    def test_missing_file_raises_source_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError) as exc_info:
            FileConfigurationSourceProvider().open(str(tmp_path / "missing.yaml"))

        assert isinstance(exc_info.value, FileNotFoundError)

    def test_directory_is_not_a_source(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError):
            FileConfigurationSourceProvider().open(str(tmp_path))


class TestResourceConfigurationSourceProvider:
    def test_reads_package_resource(self, resource_package: str) -> None:
        provider = ResourceConfigurationSourceProvider(resource_package)

        with provider.open("/config.yaml") as source:
            assert source.read() == b"name: ${NAME}\n"

    def test_missing_resource_raises_source_not_found(
        self, resource_package: str
    ) -> None:
        provider = ResourceConfigurationSourceProvider(resource_package)

        with pytest.raises(SourceNotFoundError):
            provider.open("missing.yaml")

    def test_missing_package_raises_source_not_found(self) -> None:
        provider = ResourceConfigurationSourceProvider("tplconfig_no_such_package")

        with pytest.raises(SourceNotFoundError, match="package not found"):
            provider.open("config.yaml")
