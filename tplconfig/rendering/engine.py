"""Template rendering engine."""

from __future__ import annotations

import importlib.util
import logging
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from ..core.errors import IncludePathError, TemplateRenderError
from ..core.models import (
    FileIncludePath,
    IncludePath,
    RenderConfiguration,
    ResourceIncludePath,
)

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "config"

# Failures Jinja2 lets escape from expression evaluation, in addition to
# its own TemplateError hierarchy. Includes without a loader raise TypeError.
_RENDER_ERRORS = (TemplateError, ArithmeticError, TypeError, ValueError)


def _resource_loader(include_path: ResourceIncludePath, charset: str) -> BaseLoader:
    try:
        spec = importlib.util.find_spec(include_path.package)
    except ImportError as e:
        raise IncludePathError(
            f"Could not set package for template loading: {include_path.package}"
        ) from e
    if spec is None:
        raise IncludePathError(
            f"Could not set package for template loading: {include_path.package}"
        )

    try:
        return PackageLoader(include_path.package, include_path.path, encoding=charset)
    except ValueError as e:
        raise IncludePathError(
            f"Could not set resource directory for template loading: "
            f"{include_path.package}:{include_path.path}"
        ) from e


def _file_loader(include_path: FileIncludePath, charset: str) -> BaseLoader:
    directory = include_path.directory
    if not directory.is_dir():
        raise IncludePathError(
            f"Could not set directory for template loading: {directory}"
        )
    return FileSystemLoader(str(directory), encoding=charset)


def create_loader(include_path: IncludePath, charset: str) -> BaseLoader | None:
    """Select the include loader for the configured include path.

    Returns:
        A loader for resource or file include paths, None when includes
        are not configured
    """
    if isinstance(include_path, ResourceIncludePath):
        logger.debug(
            f"Resolving includes from package {include_path.package}:{include_path.path}"
        )
        return _resource_loader(include_path, charset)
    if isinstance(include_path, FileIncludePath):
        logger.debug(f"Resolving includes from directory {include_path.directory}")
        return _file_loader(include_path, charset)

    logger.debug("No include path configured")
    return None


def detect_newline(source: str) -> str:
    """Return the line ending of ``source``, checking CRLF before a lone CR."""
    if "\r\n" in source:
        return "\r\n"
    if "\r" in source:
        return "\r"
    return "\n"


def create_environment(
    configuration: RenderConfiguration, newline_sequence: str = "\n"
) -> Environment:
    """Build a fresh Jinja2 environment for one render.

    Undefined bindings raise instead of rendering as empty strings. Jinja2
    normalizes every line ending to ``newline_sequence``; pass the source's
    own line ending to keep documents byte-identical.
    """
    return Environment(
        loader=create_loader(configuration.include_path, configuration.charset),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        newline_sequence=newline_sequence,
        variable_start_string=configuration.variable_start,
        variable_end_string=configuration.variable_end,
    )


def decode_template(raw: bytes, charset: str) -> str:
    try:
        return raw.decode(charset)
    except UnicodeDecodeError as e:
        raise TemplateRenderError(
            f"Could not render template: source is not valid {charset}."
        ) from e


def compile_template(env: Environment, source: str) -> Template:
    """Compile template text under the fixed name ``config``.

    Raises:
        TemplateRenderError: The text is not a valid template
    """
    try:
        code = env.compile(source, name=TEMPLATE_NAME)
    except TemplateError as e:
        raise TemplateRenderError() from e

    return env.template_class.from_code(env, code, env.make_globals(None))


def render_template(template: Template, context: dict[str, Any], charset: str) -> bytes:
    """Render a compiled template and encode the result.

    Raises:
        TemplateRenderError: Rendering or encoding failed
    """
    try:
        return template.render(context).encode(charset)
    except _RENDER_ERRORS as e:
        raise TemplateRenderError() from e
