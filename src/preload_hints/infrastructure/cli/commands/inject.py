"""Inject resource hints into an HTML document from a bundler stats file."""

from __future__ import annotations

import logging
import sys
import uuid
from pathlib import Path

import typer

from ...adapters.stats_compilation import (
    asset_chunks_for_entries,
    compilation_from_stats,
    load_stats,
)
from ...config.settings import Settings
from ...host.hooks import Compiler, HostCompilation, LegacyCompiler
from ...logging import configure_logging, set_correlation_id
from ...plugin import PreloadPlugin
from ....application.services.association import BuildVersion
from ....domain.models.document import DocumentPayload

app = typer.Typer(help="Inject resource hints into generated HTML")
logger = logging.getLogger(__name__)


@app.command()
def run(
    stats: Path = typer.Argument(..., help="Stats JSON file written by the bundler (--json)"),
    html: Path = typer.Argument(..., help="HTML document to augment"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the result here instead of stdout"),
    document_name: str | None = typer.Option(None, help="Output name of the document (defaults to the HTML file name)"),
    entry: list[str] | None = typer.Option(None, "--entry", "-e", help="Entry emitted into the document (repeatable; defaults to all entries)"),
    config_path: str | None = typer.Option(None, help="Path to preload-hints.toml configuration file"),
    public_path: str | None = typer.Option(None, help="Public path prefix (overrides configuration and stats)"),
    rel: str | None = typer.Option(None, help="Link relation, e.g. preload or prefetch"),
    build_version: str | None = typer.Option(None, help="Association variant: v3 or v4"),
    verbose: bool = typer.Option(False, help="Log selected files per document"),
) -> None:
    """
    Add <link> resource hints for the document's build files to its <head>.

    Examples:
        preload-hints inject run dist/stats.json dist/index.html -o dist/index.html
        preload-hints inject run stats.json index.html --rel prefetch --entry main
    """
    # Keep stdout clean for the document when no output file is given
    configure_logging(logging.INFO, verbose=verbose, stream=sys.stderr if output is None else None)
    set_correlation_id(str(uuid.uuid4()))

    try:
        settings = Settings.from_toml(config_path)
        options = settings.to_options(rel=rel)
        version = BuildVersion.parse(build_version or settings.output.build_version)
    except Exception as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(1)

    try:
        stats_data = load_stats(stats)
        html_text = html.read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        typer.echo(f"Error reading input: {e}", err=True)
        raise typer.Exit(1)

    if public_path is None:
        public_path = settings.output.public_path or None

    compilation = HostCompilation.wrap(compilation_from_stats(stats_data, public_path=public_path))

    compiler: Compiler | LegacyCompiler = Compiler() if version is BuildVersion.V4 else LegacyCompiler()
    compiler.apply(PreloadPlugin(options))
    compiler.compile(compilation)

    payload = DocumentPayload(
        html=html_text,
        output_name=document_name or html.name,
        asset_chunks=asset_chunks_for_entries(compilation, entry or None),
    )
    result = compiler.emit_document(compilation, payload)

    if compilation.errors:
        for error in compilation.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(result.html, nl=False)
    else:
        output.write_text(result.html, encoding="utf-8")
        logger.info(f"Wrote {output}")
