"""tplconfig - configuration files as Jinja2 templates.

Wraps a configuration source lookup so that configuration documents are
rendered with environment variables, system properties and caller data
before the host parses them.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .bundle import Bootstrap, TemplateConfigBundle
from .core.errors import (
    IncludePathError,
    InvalidDataModelError,
    MissingDataModelError,
    OutputWriteError,
    SourceNotFoundError,
    TemplateConfigError,
    TemplateRenderError,
)
from .core.models import (
    FileIncludePath,
    NoIncludePath,
    RenderConfiguration,
    ResourceIncludePath,
)
from .core.settings import BundleSettings
from .sources import (
    FileConfigurationSourceProvider,
    ResourceConfigurationSourceProvider,
    TemplateConfigurationSourceProvider,
)

__all__ = [
    "Bootstrap",
    "BundleSettings",
    "FileConfigurationSourceProvider",
    "FileIncludePath",
    "IncludePathError",
    "InvalidDataModelError",
    "MissingDataModelError",
    "NoIncludePath",
    "OutputWriteError",
    "RenderConfiguration",
    "ResourceConfigurationSourceProvider",
    "ResourceIncludePath",
    "SourceNotFoundError",
    "TemplateConfigBundle",
    "TemplateConfigError",
    "TemplateConfigurationSourceProvider",
    "TemplateRenderError",
]
