"""Startup integration: register template rendering with a host bootstrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import yaml

from .core.models import DataModelFactory, RenderConfiguration
from .core.settings import BundleSettings
from .environment.providers import EnvironmentProvider, SystemPropertiesProvider
from .sources.base import ConfigurationSourceProvider, FileConfigurationSourceProvider
from .sources.template import TemplateConfigurationSourceProvider

logger = logging.getLogger(__name__)


class Bundle(Protocol):
    def initialize(self, bootstrap: Bootstrap) -> None: ...

    def run(self, environment: Any) -> None: ...


@dataclass
class Bootstrap:
    """Host startup state: the active configuration source and registered bundles."""

    configuration_source_provider: ConfigurationSourceProvider = field(
        default_factory=FileConfigurationSourceProvider
    )
    bundles: list[Bundle] = field(default_factory=list)

    def add_bundle(self, bundle: Bundle) -> None:
        bundle.initialize(self)
        self.bundles.append(bundle)

    def load_configuration(self, path: str) -> Any:
        """Read ``path`` through the active source provider and parse it as YAML."""
        with self.configuration_source_provider.open(path) as source:
            return yaml.safe_load(source)

    def run(self, environment: Any = None) -> None:
        for bundle in self.bundles:
            bundle.run(environment)


class TemplateConfigBundle:
    """Lets the host's configuration file be written as a Jinja2 template.

    On initialization the bootstrap's current configuration source provider
    is wrapped in a :class:`TemplateConfigurationSourceProvider`, so it must
    be registered before the configuration is loaded.
    """

    def __init__(self, configuration: RenderConfiguration | None = None) -> None:
        self.configuration = configuration or RenderConfiguration()

    @classmethod
    def from_settings(
        cls,
        settings: BundleSettings | None = None,
        data_model_factory: DataModelFactory = dict,
    ) -> TemplateConfigBundle:
        settings = settings or BundleSettings()
        return cls(settings.to_render_configuration(data_model_factory))

    def initialize(self, bootstrap: Bootstrap) -> None:
        bootstrap.configuration_source_provider = TemplateConfigurationSourceProvider(
            bootstrap.configuration_source_provider,
            EnvironmentProvider(),
            SystemPropertiesProvider(),
            self.configuration,
        )
        logger.debug("Registered template configuration source provider")

    def run(self, environment: Any) -> None:
        pass
