"""Preview CLI: render configuration templates outside a host process."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from typing_extensions import Annotated

from ..bundle import Bootstrap, TemplateConfigBundle
from ..core.errors import TemplateConfigError
from ..core.models import RenderConfiguration
from ..core.settings import BundleSettings
from ..environment import properties
from .parsers import parse_charset, parse_define, parse_include_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tplconfig",
    help="Render Jinja2 configuration templates with environment-driven context.",
    no_args_is_help=True,
)

ConfigArgument = Annotated[
    Path, typer.Argument(help="Configuration template to render.", metavar="CONFIG")
]
CharsetOption = Annotated[
    str,
    typer.Option("--charset", help="Template and output encoding (default: utf-8)."),
]
IncludeDirOption = Annotated[
    str,
    typer.Option("--include-dir", help="Directory for template includes.", metavar="DIR"),
]
IncludeResourceOption = Annotated[
    str,
    typer.Option(
        "--include-resource",
        help="Package directory for template includes.",
        metavar="PACKAGE[:DIR]",
    ),
]
DefineOption = Annotated[
    list[str],
    typer.Option(
        "--define",
        "-D",
        help="Set a system property (format: KEY=VALUE). Repeatable.",
        metavar="KEY=VALUE",
    ),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _fail(error: Exception) -> typer.Exit:
    cause = f": {error.__cause__}" if error.__cause__ else ""
    typer.echo(f"Error: {error}{cause}", err=True)
    return typer.Exit(code=1)


def _build_configuration(
    charset: str, include_dir: str, include_resource: str, output: Path | None
) -> RenderConfiguration:
    try:
        settings = BundleSettings()
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid TPLCONFIG_* settings: {e}") from e

    return RenderConfiguration(
        charset=parse_charset(charset or settings.charset),
        include_path=parse_include_path(
            include_dir, include_resource, settings.include_path()
        ),
        output_path=output or settings.output_path,
    )


def _apply_defines(defines: list[str]) -> None:
    for key, value in map(parse_define, defines):
        properties.set_property(key, value)


def _bootstrap(configuration: RenderConfiguration) -> Bootstrap:
    logger.debug(
        f"Charset: {configuration.charset}, include path: {configuration.include_path.kind}"
    )
    bootstrap = Bootstrap()
    bootstrap.add_bundle(TemplateConfigBundle(configuration))
    return bootstrap


@app.command()
def render(
    config: ConfigArgument,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Also write the rendered document to this path.",
            metavar="PATH",
        ),
    ] = None,
    charset: CharsetOption = "",
    include_dir: IncludeDirOption = "",
    include_resource: IncludeResourceOption = "",
    defines: DefineOption = [],
    verbose: VerboseOption = False,
) -> None:
    """Render a configuration template and print the result."""
    _configure_logging(verbose)
    _apply_defines(defines)
    configuration = _build_configuration(charset, include_dir, include_resource, output)

    bootstrap = _bootstrap(configuration)
    try:
        with bootstrap.configuration_source_provider.open(str(config)) as source:
            rendered = source.read()
    except (TemplateConfigError, FileNotFoundError) as e:
        raise _fail(e) from e

    if configuration.output_path is None:
        typer.echo(rendered.decode(configuration.charset), nl=False)


@app.command()
def check(
    config: ConfigArgument,
    charset: CharsetOption = "",
    include_dir: IncludeDirOption = "",
    include_resource: IncludeResourceOption = "",
    defines: DefineOption = [],
    verbose: VerboseOption = False,
) -> None:
    """Render a configuration template and verify the result is valid YAML."""
    _configure_logging(verbose)
    _apply_defines(defines)
    configuration = _build_configuration(charset, include_dir, include_resource, None)

    bootstrap = _bootstrap(configuration)
    try:
        bootstrap.load_configuration(str(config))
    except (TemplateConfigError, FileNotFoundError, yaml.YAMLError) as e:
        raise _fail(e) from e

    typer.echo(f"Configuration OK: {config}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
