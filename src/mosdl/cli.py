"""
MOSDL CLI.

Commands:
- generate: Write one MOSDL file per area of a specification
- render: Print the MOSDL text of a specification to stdout
- generators: List the available generators
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from mosdl._version import get_version
from mosdl.core import ir
from mosdl.core.config import CONFIG_FILE_NAME, GeneratorConfig, load_config, parse_doc_type
from mosdl.core.errors import MosdlError
from mosdl.core.loader import load_specification
from mosdl.generators import get_registry
from mosdl.generators.mosdl import MosdlGenerator

app = typer.Typer(
    help="MOSDL - render MAL service specifications as MOSDL text",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"mosdl version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """MOSDL CLI main callback for global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_config(config_path: Path, doc_type: str | None) -> GeneratorConfig:
    """Load config and apply the command line doc type on top."""
    config = load_config(config_path)
    if doc_type is not None:
        config.doc_type = parse_doc_type(doc_type)
    return config


def _load_spec(spec_file: Path) -> ir.Specification:
    try:
        return load_specification(spec_file)
    except MosdlError as e:
        typer.echo(f"Error loading specification: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def generate(
    spec_file: Path = typer.Argument(..., help="Specification file (.json, .yaml or .yml)"),  # noqa: B008
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: from mosdl.toml, else current directory)",
    ),
    doc_type: str | None = typer.Option(
        None,
        "--doc-type",
        "-d",
        help="Documentation type: bulk, inline or suppress (default: bulk)",
    ),
    config_path: Path = typer.Option(  # noqa: B008
        Path(CONFIG_FILE_NAME),
        "--config",
        "-c",
        help="Generator configuration file",
    ),
    generator_name: str = typer.Option("mosdl", "--generator", "-g", help="Generator to run"),
) -> None:
    """Generate one MOSDL file per area of SPEC_FILE."""
    try:
        config = _load_config(config_path, doc_type)
    except MosdlError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    spec = _load_spec(spec_file)
    output_dir = output if output is not None else config.output_dir

    try:
        generator = get_registry().get(
            generator_name, doc_type=config.doc_type, file_suffix=config.file_suffix
        )
        result = generator.generate(spec, output_dir)
    except MosdlError as e:
        typer.echo(f"Generation failed: {e}", err=True)
        raise typer.Exit(code=1)

    for path in result.files_created:
        typer.echo(f"  ✓ {path}")
    typer.echo(f"Generated {len(result.files_created)} file(s) in {output_dir}")


@app.command()
def render(
    spec_file: Path = typer.Argument(..., help="Specification file (.json, .yaml or .yml)"),  # noqa: B008
    doc_type: str = typer.Option("bulk", "--doc-type", "-d", help="Documentation type"),
    area: str | None = typer.Option(None, "--area", "-a", help="Render only this area"),
) -> None:
    """Print the MOSDL text of SPEC_FILE to stdout."""
    try:
        generator = MosdlGenerator(doc_type=parse_doc_type(doc_type))
    except MosdlError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    spec = _load_spec(spec_file)
    areas = spec.areas
    if area is not None:
        selected = spec.get_area(area)
        if selected is None:
            typer.echo(f"Area '{area}' not found", err=True)
            raise typer.Exit(code=1)
        areas = [selected]

    for selected_area in areas:
        typer.echo(generator.render_area(selected_area), nl=False)


@app.command(name="generators")
def list_generators() -> None:
    """List the available generators."""
    registry = get_registry()
    for name in registry.list_generators():
        capabilities = registry.get(name).get_capabilities()
        typer.echo(f"{name:12} {capabilities.description}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
