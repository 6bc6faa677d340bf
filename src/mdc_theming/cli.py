"""
mdc-theme command line interface.

Commands:
- classes: resolve theme options into class names
- colors: resolve color options into CSS variables with on-colors
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ._version import get_version
from .config import ThemeConfig, load_colors, load_config
from .core.colors import contrast_ratio
from .core.derive import normalize_colors
from .core.errors import OptionInputError, ThemingError
from .core.keys import on_color_key
from .css import to_css_block
from .resolver import resolve_colors, resolve_options, theme_class_names

app = typer.Typer(
    help="Resolve Material theme options and colors",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdc-theme {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Resolve Material theme options and colors."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def parse_pairs(pairs: list[str]) -> dict[str, str]:
    """
    Parse KEY=COLOR arguments into an ordered option map.

    Raises:
        OptionInputError: If an argument has no '=' or an empty key
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise OptionInputError(f"Expected KEY=COLOR, got {pair!r}")
        options[key] = value.strip()
    return options


def _load_settings(config_path: Path | None, colors_path: Path | None) -> ThemeConfig:
    if config_path is not None:
        return load_config(config_path)
    if colors_path is not None:
        return load_config(colors_path)
    return ThemeConfig()


@app.command("classes")
def classes(
    use: Annotated[list[str] | None, typer.Argument(help="Theme options")] = None,
    bare: Annotated[bool, typer.Option("--bare", help="Print tokens without class prefix")] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Theme config TOML file")
    ] = None,
) -> None:
    """Resolve theme options into class names."""
    try:
        settings = _load_settings(config_path, None)
    except ThemingError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if bare:
        names = resolve_options(use or [])
    else:
        names = theme_class_names(use or [], settings.class_prefix)

    if output_json:
        typer.echo(json.dumps(names))
    else:
        typer.echo(" ".join(names))


@app.command("colors")
def colors(
    pairs: Annotated[list[str] | None, typer.Argument(help="Color options as KEY=COLOR")] = None,
    colors_path: Annotated[
        Path | None, typer.Option("--file", "-f", help="TOML file with a [theme.colors] table")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Theme config TOML file")
    ] = None,
    text_roles: Annotated[
        bool, typer.Option("--text-roles", help="Also derive text-role variables")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output_css: Annotated[bool, typer.Option("--css", help="Output as a CSS rule")] = False,
    selector: Annotated[str, typer.Option("--selector", help="Selector for --css")] = ":root",
) -> None:
    """Resolve color options into CSS variables with derived on-colors."""
    if output_json and output_css:
        err_console.print("[red]--json and --css cannot be combined[/red]")
        raise typer.Exit(code=1)

    try:
        settings = _load_settings(config_path, colors_path)
        options = load_colors(colors_path) if colors_path is not None else {}
        options.update(parse_pairs(pairs or []))
    except ThemingError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if text_roles:
        settings = settings.model_copy(update={"text_roles": True})

    resolved = resolve_colors(options, settings)

    if output_json:
        typer.echo(json.dumps(resolved, indent=2))
        return
    if output_css:
        typer.echo(to_css_block(resolved, selector=selector))
        return

    if not resolved:
        console.print("[dim]No colors given.[/dim]")
        return

    inputs = normalize_colors(options, settings.variable_prefix)
    table = Table(title="Theme colors")
    table.add_column("Variable")
    table.add_column("Value")
    table.add_column("Source", style="dim")
    table.add_column("Contrast")

    for key, value in resolved.items():
        ratio = _pair_contrast(key, value, resolved, settings.variable_prefix)
        table.add_row(
            key,
            value,
            "input" if key in inputs else "derived",
            f"{ratio:.2f}" if ratio is not None else "",
        )

    console.print(table)


def _pair_contrast(
    key: str, value: str, resolved: dict[str, str], prefix: str
) -> float | None:
    """Contrast between a color and its on-color, when both are present."""
    on_value = resolved.get(on_color_key(key, prefix))
    if on_value is None:
        return None
    return contrast_ratio(on_value, value)


def main() -> None:
    app()
