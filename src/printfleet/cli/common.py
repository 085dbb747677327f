from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from printfleet.config import (
    Settings,
    data_dir_from_settings,
    get_settings,
    resolve_config_path,
)
from printfleet.models import ImportIssue
from printfleet.storage import Database


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_database(settings: Settings, data_dir: Path | None = None) -> Database:
    path = data_dir or data_dir_from_settings(settings)
    return Database(path)


def read_import_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Could not read {path}: {exc}", err=True)
        raise typer.Exit(1) from exc


def print_issues(
    console: Console,
    errors: list[ImportIssue],
    warnings: list[ImportIssue] | None = None,
) -> None:
    if errors:
        console.print(f"[red]✗[/red] {len(errors)} error(s):\n")
        for issue in errors:
            console.print(f"  [red]•[/red] {issue}")
        console.print()

    if warnings:
        console.print(f"[yellow]⚠[/yellow] {len(warnings)} warning(s):\n")
        for issue in warnings:
            console.print(f"  [yellow]•[/yellow] {issue}")
        console.print()
