"""Configuration source provider that renders configuration files as templates."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

from ..core.errors import OutputWriteError
from ..core.models import RenderConfiguration
from ..environment.providers import BindingsProvider
from ..rendering import context, engine
from ..rendering.io import replace_file
from .base import ConfigurationSourceProvider

logger = logging.getLogger(__name__)


class TemplateConfigurationSourceProvider:
    """Wraps a base provider and renders whatever it returns as a Jinja2 template.

    Environment variables, system properties and the caller's data model
    are merged into the rendering context on every call; see
    :func:`tplconfig.rendering.context.build_context` for precedence.
    Nothing is cached between calls.
    """

    def __init__(
        self,
        parent: ConfigurationSourceProvider,
        environment_provider: BindingsProvider,
        system_properties_provider: BindingsProvider,
        configuration: RenderConfiguration,
    ) -> None:
        self.parent = parent
        self.environment_provider = environment_provider
        self.system_properties_provider = system_properties_provider
        self.configuration = configuration

    def open(self, path: str) -> BinaryIO:
        """Render the configuration template at ``path``.

        Raises:
            SourceNotFoundError: Propagated from the base provider
            TemplateRenderError: The template could not be parsed or rendered
            MissingDataModelError: The data-model factory returned None
            OutputWriteError: The rendered document could not be persisted
        """
        charset = self.configuration.charset

        with self.parent.open(path) as source:
            raw = source.read()
        text = engine.decode_template(raw, charset)

        env = engine.create_environment(
            self.configuration, newline_sequence=engine.detect_newline(text)
        )
        template = engine.compile_template(env, text)

        data_model = context.resolve_data_model(self.configuration.data_model_factory)
        render_context = context.build_context(
            self.environment_provider.get(),
            self.system_properties_provider.get(),
            data_model,
        )

        logger.debug(f"Rendering configuration template: {path}")
        rendered = engine.render_template(template, render_context, charset)

        self._write_config_file(rendered)
        return io.BytesIO(rendered)

    def _write_config_file(self, rendered: bytes) -> None:
        output_path = self.configuration.output_path
        if output_path is None:
            return

        target = Path(output_path).absolute()
        try:
            written = replace_file(target, rendered)
        except OSError as e:
            raise OutputWriteError(target) from e
        logger.info(f"Wrote rendered configuration to {written}")
