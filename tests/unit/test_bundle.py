from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import InMemorySourceProvider
from tplconfig.bundle import Bootstrap, TemplateConfigBundle
from tplconfig.core.errors import TemplateRenderError
from tplconfig.core.models import RenderConfiguration
from tplconfig.core.settings import BundleSettings
from tplconfig.environment import properties
from tplconfig.environment.providers import (
    EnvironmentProvider,
    SystemPropertiesProvider,
)
from tplconfig.sources.base import FileConfigurationSourceProvider
from tplconfig.sources.template import TemplateConfigurationSourceProvider


class TestTemplateConfigBundle:
    def test_default_configuration(self) -> None:
        assert TemplateConfigBundle().configuration == RenderConfiguration()

    def test_initialize_wraps_prior_provider(self) -> None:
        prior = InMemorySourceProvider()
        configuration = RenderConfiguration(charset="latin-1")
        bootstrap = Bootstrap(configuration_source_provider=prior)

        TemplateConfigBundle(configuration).initialize(bootstrap)

        provider = bootstrap.configuration_source_provider
        assert isinstance(provider, TemplateConfigurationSourceProvider)
        assert provider.parent is prior
        assert provider.configuration is configuration
        assert isinstance(provider.environment_provider, EnvironmentProvider)
        assert isinstance(provider.system_properties_provider, SystemPropertiesProvider)

    def test_default_bootstrap_reads_files(self) -> None:
        bootstrap = Bootstrap()
        bootstrap.add_bundle(TemplateConfigBundle())

        provider = bootstrap.configuration_source_provider
        assert isinstance(provider, TemplateConfigurationSourceProvider)
        assert isinstance(provider.parent, FileConfigurationSourceProvider)

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TPLCONFIG_FILE_INCLUDE_PATH", raising=False)
        monkeypatch.delenv("TPLCONFIG_RESOURCE_INCLUDE_PATH", raising=False)
        settings = BundleSettings(charset="latin-1", output_path=Path("/tmp/out.yaml"))

        bundle = TemplateConfigBundle.from_settings(settings, lambda: {"a": 1})

        assert bundle.configuration.charset == "iso8859-1"
        assert bundle.configuration.output_path == Path("/tmp/out.yaml")
        assert bundle.configuration.data_model_factory() == {"a": 1}

    def test_run_is_a_no_op(self) -> None:
        bootstrap = Bootstrap(configuration_source_provider=InMemorySourceProvider())
        bootstrap.add_bundle(TemplateConfigBundle())
        provider = bootstrap.configuration_source_provider

        bootstrap.run()

        assert bootstrap.configuration_source_provider is provider


class TestBootstrapLoadConfiguration:
    def test_loads_rendered_yaml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TPLCONFIG_TEST_DB_HOST", "db.internal")
        properties.set_property("app.replicas", "3")
        template = (
            "database:\n"
            "  host: ${TPLCONFIG_TEST_DB_HOST}\n"
            "  port: ${port}\n"
            '  replicas: ${sys["app.replicas"]}\n'
        )
        bootstrap = Bootstrap(
            configuration_source_provider=InMemorySourceProvider({"app.yaml": template})
        )
        bootstrap.add_bundle(
            TemplateConfigBundle(
                RenderConfiguration(data_model_factory=lambda: {"port": 5432})
            )
        )

        config = bootstrap.load_configuration("app.yaml")

        assert config == {
            "database": {"host": "db.internal", "port": 5432, "replicas": 3}
        }

    def test_render_failure_aborts_loading(self) -> None:
        bootstrap = Bootstrap(
            configuration_source_provider=InMemorySourceProvider(
                {"app.yaml": "port: ${TPLCONFIG_TEST_UNDEFINED_BINDING}"}
            )
        )
        bootstrap.add_bundle(TemplateConfigBundle())

        with pytest.raises(TemplateRenderError):
            bootstrap.load_configuration("app.yaml")

    def test_without_bundle_reads_raw_document(self) -> None:
        bootstrap = Bootstrap(
            configuration_source_provider=InMemorySourceProvider({"app.yaml": "a: 1\n"})
        )

        assert bootstrap.load_configuration("app.yaml") == {"a": 1}
