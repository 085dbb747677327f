from __future__ import annotations

from typing import Annotated

import typer

from printfleet.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands.export import register as register_export
from .commands.imports import register as register_imports
from .commands.init import register as register_init
from .commands.printers import register as register_printers

app = typer.Typer(
    help="printfleet - printer registry with multi-format import/export",
    no_args_is_help=True,
)

app.add_typer(config_cmd.app, name="config", help="Show or create the config file")

register_init(app)
register_printers(app)
register_imports(app)
register_export(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="DEBUG, INFO, WARNING or ERROR (default from PRINTFLEET_LOGLEVEL)",
        ),
    ] = None,
) -> None:
    """printfleet CLI."""
    setup_logging(log_level)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"printfleet version {get_version('printfleet')}")
        raise typer.Exit()
