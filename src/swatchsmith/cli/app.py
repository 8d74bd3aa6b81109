"""
swatchsmith command line.

Commands:
- generate: Print a swatch for one color
- init: Scaffold swatchspec.yaml
- build: Generate every palette in swatchspec.yaml and write token files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from swatchsmith.cli.utils import configure_logging, version_callback
from swatchsmith.core.colors import parse_color, to_hex
from swatchsmith.core.errors import SwatchError
from swatchsmith.core.swatch import Swatch, swatch
from swatchsmith.core.swatchspec_loader import (
    DEFAULT_SEED_COLOR,
    SWATCHSPEC_FILE,
    generate_palettes,
    load_swatchspec,
    scaffold_swatchspec,
)
from swatchsmith.core.token_export import (
    export_css_file,
    export_dtcg_file,
    generate_css_variables,
    generate_dtcg_tokens,
)

app = typer.Typer(
    help="swatchsmith - perceptual shade ramps for design systems",
    no_args_is_help=True,
)

console = Console()

OUTPUT_CHOICES = ("table", "json", "css", "dtcg")


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """swatchsmith CLI main callback for global options."""
    configure_logging(verbose)


def _fail(error: Exception) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _print_table(color: str, result: Swatch) -> None:
    table = Table(title=f"Swatch for {color}")
    table.add_column("Tone", justify="right", style="cyan")
    table.add_column("Swatch")
    table.add_column("Value")
    for tone, value in result.items():
        table.add_row(str(tone), Text(" " * 8, style=f"on {to_hex(value)}"), value)
    console.print(table)


@app.command("generate")
def generate_command(
    color: str = typer.Argument(
        ..., help="Seed color (hex, named, rgb(), hsl(), oklab(), oklch())"
    ),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Color format: hex, rgb, hsl, oklab, oklch"
    ),
    steps: int = typer.Option(11, "--steps", "-s", help="Number of tones: 11 or 21"),
    scale: str = typer.Option("dynamic", "--scale", help="Lightness scale: dynamic or fixed"),
    variant: str = typer.Option(
        "base", "--variant", help="base, deep, neutral, pastel, subtle or vibrant"
    ),
    lightness_factor: float = typer.Option(
        1.5, "--lightness-factor", help="Dynamic curve exponent"
    ),
    min_lightness: float = typer.Option(0.2, "--min-lightness", help="Darkest dynamic tone"),
    max_lightness: float = typer.Option(0.97, "--max-lightness", help="Lightest dynamic tone"),
    output: str = typer.Option("table", "--output", "-o", help="table, json, css or dtcg"),
    name: str = typer.Option("primary", "--name", "-n", help="Palette name for css/dtcg output"),
) -> None:
    """Generate a swatch from a single color."""
    if output not in OUTPUT_CHOICES:
        _fail(ValueError(f"--output must be one of: {', '.join(OUTPUT_CHOICES)}"))

    try:
        result = swatch(
            color,
            format=output_format,
            swatch_steps=steps,
            scale=scale,
            variant=variant,
            lightness_factor=lightness_factor,
            min_lightness=min_lightness,
            max_lightness=max_lightness,
        )
    except SwatchError as e:
        _fail(e)

    if output == "json":
        typer.echo(json.dumps({str(tone): value for tone, value in result.items()}, indent=2))
    elif output == "css":
        typer.echo(generate_css_variables({name: result}), nl=False)
    elif output == "dtcg":
        typer.echo(json.dumps(generate_dtcg_tokens({name: result}), indent=2))
    else:
        _print_table(color, result)


@app.command("init")
def init_command(
    project_dir: Path = typer.Option(".", "--project-dir", "-p", help="Project directory"),
    color: str = typer.Option(DEFAULT_SEED_COLOR, "--color", "-c", help="Primary seed color"),
) -> None:
    """Scaffold a swatchspec.yaml with a single primary palette."""
    try:
        parse_color(color)
    except SwatchError as e:
        _fail(e)

    path = scaffold_swatchspec(project_dir, color)
    if path is None:
        typer.echo(f"{SWATCHSPEC_FILE} already exists in {project_dir}, leaving it unchanged")
        return
    typer.echo(f"Created {path}")


@app.command("build")
def build_command(
    project_dir: Path = typer.Option(".", "--project-dir", "-p", help="Project directory"),
    out: Path | None = typer.Option(None, "--out", help="DTCG tokens.json output path"),
    css: Path | None = typer.Option(None, "--css", help="CSS custom properties output path"),
) -> None:
    """Generate all palettes in swatchspec.yaml and write token files."""
    try:
        spec = load_swatchspec(project_dir, use_defaults=False)
        palettes = generate_palettes(spec)
    except SwatchError as e:
        _fail(e)

    if out is None and css is None:
        out = project_dir / "tokens.json"

    if out is not None:
        path = export_dtcg_file(palettes, out)
        typer.echo(f"Wrote {len(palettes)} palettes to {path}")
    if css is not None:
        path = export_css_file(palettes, css, prefix=spec.css_prefix)
        typer.echo(f"Wrote {len(palettes)} palettes to {path}")


def main() -> None:
    app(standalone_mode=True)
