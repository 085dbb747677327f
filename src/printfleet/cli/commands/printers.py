from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from printfleet.cli.common import build_database, load_settings_or_exit
from printfleet.core.validator import validate_record
from printfleet.models import ImportableRecord
from printfleet.utils.redaction import Redactor


def list_printers(
    show_secrets: Annotated[
        bool,
        typer.Option("--show-secrets", help="Show access codes and full IPs"),
    ] = False,
) -> None:
    """List registered printers."""
    settings = load_settings_or_exit()
    db = build_database(settings)
    try:
        registry = db.load_printers()
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    console = Console()

    if not registry.printers:
        console.print("No printers registered.")
        console.print(
            f"Use 'printfleet add' or 'printfleet import' or edit {db.printers_path}"
        )
        return

    redactor = Redactor(enabled=not show_secrets)
    table = Table()
    table.add_column("Serial", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Model")
    table.add_column("IP")
    table.add_column("Access Code")
    table.add_column("Last Update")

    for serial, printer in sorted(registry.printers.items()):
        table.add_row(
            serial,
            printer.name,
            printer.model,
            redactor.redact_ip(printer.ip),
            redactor.redact_access_code(printer.access_code),
            printer.last_update.isoformat(timespec="seconds")
            if printer.last_update
            else "",
        )

    console.print(table)


def add_printer(
    name: str = typer.Argument(..., help="Printer name"),
    model: str = typer.Argument(..., help="Printer model"),
    ip: str = typer.Argument(..., help="IPv4 address"),
    access_code: str = typer.Argument(..., help="LAN access code"),
    serial: str = typer.Argument(..., help="Serial number"),
) -> None:
    """Add or replace a printer."""
    console = Console()

    record = ImportableRecord(
        name=name, model=model, ip=ip, access_code=access_code, serial=serial
    )
    checked = validate_record(record, line=1)
    for warning in checked.warnings:
        console.print(f"[yellow]⚠[/yellow] {warning.field}: {warning.message}")
    if checked.errors:
        for error in checked.errors:
            console.print(f"[red]✗[/red] {error.field}: {error.message}")
        raise typer.Exit(1)

    settings = load_settings_or_exit()
    db = build_database(settings)
    printer = db.add_printer(checked.record)

    console.print(f"[green]✓[/green] Added '{printer.name}' ({printer.serial})")


def remove_printer(serial: str = typer.Argument(..., help="Serial number")) -> None:
    """Remove a printer by serial number."""
    settings = load_settings_or_exit()
    db = build_database(settings)

    console = Console()
    if db.remove_printer(serial):
        console.print(f"[green]✓[/green] Removed printer '{serial}'")
    else:
        console.print(f"[yellow]![/yellow] Printer '{serial}' not found")
        raise typer.Exit(1)


def register(app: typer.Typer) -> None:
    app.command("list")(list_printers)
    app.command("add")(add_printer)
    app.command("remove")(remove_printer)
