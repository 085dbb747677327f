from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from printfleet.cli.common import (
    build_database,
    load_settings_or_exit,
    print_issues,
    read_import_file,
)
from printfleet.models import DuplicatePolicy, ImportOptions
from printfleet.services import ImportService
from printfleet.storage import DatabaseRegistry
from printfleet.utils.redaction import Redactor

logger = logging.getLogger(__name__)

FileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True, dir_okay=False, readable=True, help="File to import"
    ),
]


def preview(file: FileArgument) -> None:
    """Show what importing a file would do, without changing anything."""
    settings = load_settings_or_exit()
    service = ImportService(DatabaseRegistry(build_database(settings)))
    content = read_import_file(file)

    result = asyncio.run(service.create_preview(content, file.name))

    console = Console()
    console.print(f"[bold]Format:[/bold] {result.format}")
    console.print(
        f"Records: {result.total_records} total, "
        f"[green]{result.valid_records} valid[/green], "
        f"[red]{result.invalid_records} invalid[/red]"
    )
    if result.duplicate_serials:
        console.print(
            "[yellow]Repeated in file:[/yellow] " + ", ".join(result.duplicate_serials)
        )
    if result.existing_serials:
        console.print(
            "[blue]Already registered:[/blue] " + ", ".join(result.existing_serials)
        )

    if result.sample_data:
        redactor = Redactor()
        table = Table(title="Sample")
        table.add_column("Serial", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Model")
        table.add_column("IP")
        table.add_column("Access Code")
        for record in result.sample_data:
            table.add_row(
                record.serial,
                record.name,
                record.model,
                record.ip,
                redactor.redact_access_code(record.access_code),
            )
        console.print(table)

    console.print()
    print_issues(console, result.errors, result.warnings)

    if result.errors:
        raise typer.Exit(1)


def import_file(
    file: FileArgument,
    on_duplicate: Annotated[
        DuplicatePolicy | None,
        typer.Option(
            "--on-duplicate",
            help="What to do with serials already registered (default from config)",
        ),
    ] = None,
    validate_only: Annotated[
        bool,
        typer.Option("--validate-only", help="Check the file without importing"),
    ] = False,
) -> None:
    """Import printers from a JSON, CSV, YAML or TXT file."""
    settings = load_settings_or_exit()
    service = ImportService(DatabaseRegistry(build_database(settings)))
    content = read_import_file(file)

    policy = on_duplicate or settings.imports.on_duplicate
    options = ImportOptions.from_policy(policy, validate_only=validate_only)
    logger.debug("Importing %s with policy=%s", file, policy)

    result = asyncio.run(service.import_printers(content, file.name, options))

    console = Console()
    print_issues(console, result.errors)

    if result.validate_only:
        if result.success:
            console.print(
                f"[green]✓[/green] {result.imported} printer(s) would be imported"
            )
    elif result.imported or result.skipped or result.success:
        console.print(f"[green]✓[/green] Imported {result.imported} printer(s)")
        if result.skipped:
            console.print(
                f"[yellow]![/yellow] Skipped {result.skipped} already registered"
            )

    if not result.success:
        raise typer.Exit(1)


def register(app: typer.Typer) -> None:
    app.command("preview")(preview)
    app.command("import")(import_file)
