"""Typer CLI for module drawings."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from modulecad.application.config import (
    ConfigError,
    config_to_module,
    config_to_origin,
    load_config,
)
from modulecad.application.factory import get_factory
from modulecad.cli.commands import (
    display_load_error,
    validate_command,
)
from modulecad.infrastructure.exporters import ExporterRegistry

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="modulecad",
    help="Generate technical front-view drawings of furniture modules.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate technical front-view drawings of furniture modules."""
    logging.basicConfig(
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("modulecad").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


@app.command()
def render(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: svg, dxf, json"),
    ] = "svg",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: stdout)"),
    ] = None,
    sanitize: Annotated[
        bool,
        typer.Option(
            "--sanitize/--no-sanitize",
            help="Clamp values into product limits before drawing",
        ),
    ] = True,
) -> None:
    """Render a module configuration to a drawing.

    Validation problems are reported on stderr but never stop the drawing.

    Example:
        modulecad render wardrobe.json -f dxf -o wardrobe.dxf
    """
    output_format = output_format.lower()
    available = ExporterRegistry.available_formats()
    if output_format not in available:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    logger.debug(f"Rendering {config_file} as {output_format} (sanitize={sanitize})")
    command = get_factory().create_generate_command(sanitize=sanitize)
    result = command.execute(config_to_module(config), config_to_origin(config))

    for error in result.validation.errors:
        typer.echo(f"Error: {error.path}: {error.message}", err=True)
    for warning in result.validation.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    exporter = ExporterRegistry.get(output_format)()
    if output_file is None:
        typer.echo(exporter.export_string(result.shapes))
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    exporter.export(result.shapes, output_file)
    typer.echo(f"Wrote {len(result.shapes)} shapes to {output_file}")


@app.command(name="unit-types")
def unit_types() -> None:
    """List unit types with a dedicated generator and their default size."""
    dispatcher = get_factory().get_dispatcher()
    for unit_type in dispatcher.unit_types:
        preset = dispatcher.defaults_for(unit_type.value)
        size = " x ".join(
            f"{preset.get(key, 0):g}" for key in ("width_mm", "height_mm", "depth_mm")
        )
        typer.echo(f"{unit_type.value:<18} {size} mm")


if __name__ == "__main__":
    app()
