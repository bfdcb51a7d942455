from __future__ import annotations

import io
import uuid
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, BinaryIO

import pytest

from tplconfig.core.errors import SourceNotFoundError
from tplconfig.core.models import RenderConfiguration
from tplconfig.environment import properties
from tplconfig.sources.template import TemplateConfigurationSourceProvider


class InMemorySourceProvider:
    """Base provider serving documents from a dict and recording lookups."""

    def __init__(self, documents: Mapping[str, str | bytes] | None = None) -> None:
        self.documents = dict(documents or {})
        self.calls: list[str] = []

    def open(self, path: str) -> BinaryIO:
        self.calls.append(path)
        if path not in self.documents:
            raise SourceNotFoundError(path)
        document = self.documents[path]
        if isinstance(document, str):
            document = document.encode("utf-8")
        return io.BytesIO(document)


class StaticBindingsProvider:
    """Bindings provider returning a mutable dict, for observing live changes."""

    def __init__(self, bindings: dict[str, str] | None = None) -> None:
        self.bindings = bindings if bindings is not None else {}

    def get(self) -> dict[str, str]:
        return dict(self.bindings)


MakeProvider = Callable[..., TemplateConfigurationSourceProvider]


@pytest.fixture(autouse=True)
def _reset_system_properties() -> Any:
    properties.clear_properties()
    yield
    properties.clear_properties()


@pytest.fixture
def make_provider() -> MakeProvider:
    """Return a factory building a template provider over in-memory documents."""

    def _make(
        documents: Mapping[str, str | bytes] | None = None,
        *,
        configuration: RenderConfiguration | None = None,
        environment: dict[str, str] | None = None,
        system_properties: dict[str, str] | None = None,
        parent: Any = None,
    ) -> TemplateConfigurationSourceProvider:
        return TemplateConfigurationSourceProvider(
            parent if parent is not None else InMemorySourceProvider(documents),
            StaticBindingsProvider(environment),
            StaticBindingsProvider(system_properties),
            configuration or RenderConfiguration(),
        )

    return _make


@pytest.fixture
def resource_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Create an importable package with a ``templates`` directory and a config file."""
    name = f"tplconfig_fixture_{uuid.uuid4().hex}"
    site = tmp_path / "site"
    package_dir = site / name
    (package_dir / "templates").mkdir(parents=True)
    (package_dir / "__init__.py").write_text("")
    (package_dir / "templates" / "logging.yaml").write_text("level: ${LEVEL}\n")
    (package_dir / "config.yaml").write_text("name: ${NAME}\n")
    monkeypatch.syspath_prepend(str(site))
    return name
