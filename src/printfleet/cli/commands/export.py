from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from printfleet.cli.common import build_database, load_settings_or_exit
from printfleet.models import ExportOptions, FileFormat
from printfleet.services import ImportService
from printfleet.storage import DatabaseRegistry


def register(app: typer.Typer) -> None:
    @app.command()
    def export(
        fmt: Annotated[
            FileFormat | None,
            typer.Option("--format", "-f", help="Output format (default from config)"),
        ] = None,
        output: Annotated[
            Path | None,
            typer.Option(
                "--output",
                "-o",
                help="Output file or directory; '-' prints to stdout",
            ),
        ] = None,
        timestamps: Annotated[
            bool | None,
            typer.Option("--timestamps/--no-timestamps", help="Add lastUpdate"),
        ] = None,
        pretty: Annotated[
            bool | None,
            typer.Option("--pretty/--compact", help="Indent JSON output"),
        ] = None,
    ) -> None:
        """Export registered printers."""
        settings = load_settings_or_exit()
        service = ImportService(DatabaseRegistry(build_database(settings)))

        defaults = settings.exports
        options = ExportOptions(
            format=fmt or defaults.format,
            include_timestamps=(
                defaults.include_timestamps if timestamps is None else timestamps
            ),
            pretty_format=defaults.pretty if pretty is None else pretty,
        )
        result = asyncio.run(service.export_printers(options))

        if not result.success:
            typer.echo(f"Export failed: {result.error}", err=True)
            raise typer.Exit(1)

        if output is not None and str(output) == "-":
            typer.echo(result.data)
            return

        target = Path(result.filename)
        if output is not None:
            target = output / result.filename if output.is_dir() else output
        try:
            target.write_text(result.data, encoding="utf-8")
        except OSError as exc:
            typer.echo(f"Could not write {target}: {exc}", err=True)
            raise typer.Exit(1) from exc

        Console().print(f"[green]✓[/green] Wrote {target}")
