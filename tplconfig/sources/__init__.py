from .base import (
    ConfigurationSourceProvider,
    FileConfigurationSourceProvider,
    ResourceConfigurationSourceProvider,
)
from .template import TemplateConfigurationSourceProvider

__all__ = [
    "ConfigurationSourceProvider",
    "FileConfigurationSourceProvider",
    "ResourceConfigurationSourceProvider",
    "TemplateConfigurationSourceProvider",
]
