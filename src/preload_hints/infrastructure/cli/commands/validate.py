"""Validate preload-hints configuration."""

from __future__ import annotations

import logging
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from ...config.settings import Settings

app = typer.Typer(help="Validate configuration")
console = Console()
logger = logging.getLogger(__name__)


def _describe(value: Any) -> str:
    """Render an option value for display."""
    if value is None:
        return "-"
    if callable(value):
        return f"<callable {getattr(value, '__name__', type(value).__name__)}>"
    if isinstance(value, list):
        if not value:
            return "[]"
        return ", ".join(getattr(item, "pattern", str(item)) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{k} → {v}" for k, v in value.items())
    return str(value)


@app.command()
def run(
    config_path: str | None = typer.Option(None, help="Path to preload-hints.toml configuration file"),
) -> None:
    """
    Load the configuration and show the effective options.

    Examples:
        preload-hints validate run
        preload-hints validate run --config-path build/preload-hints.toml
    """
    try:
        settings = Settings.from_toml(config_path)
        options = settings.to_options()
    except Exception as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Effective preload-hints options")
    table.add_column("Option", style="cyan")
    table.add_column("Value")

    rows = [
        ("rel", options.rel),
        ("include", options.include),
        ("as", "extension inference" if options.as_ is None else options.as_),
        ("fileWhitelist", options.file_whitelist),
        ("fileBlacklist", options.file_blacklist),
        ("excludeHtmlNames", options.exclude_html_names),
        ("public_path", settings.output.public_path or "(from stats)"),
        ("build_version", settings.output.build_version),
    ]
    for name, value in rows:
        table.add_row(name, _describe(value))

    console.print(table)
    console.print("\n[green]✓ Configuration is valid[/green]")
