from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from coffee_dms.application.import_lots import ImportLotsHandler
from coffee_dms.domain.exceptions import DomainException
from coffee_dms.infrastructure.cli.context import CliState, pass_state
from coffee_dms.infrastructure.cli.lot_commands import (
    echo_import_summary,
    lot_add,
    lot_import,
    lot_list,
    lot_remove,
    lot_show,
    lot_update,
    lot_value,
)
from coffee_dms.infrastructure.cli.menu import InventoryMenu
from coffee_dms.infrastructure.config import BACKENDS, load_settings
from coffee_dms.logger import set_level


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS, case_sensitive=False),
    default=None,
    help="Storage backend (overrides COFFEE_DMS_BACKEND).",
)
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SQLite database file (overrides COFFEE_DMS_DB_PATH).",
)
@click.pass_context
def cli(ctx: click.Context, backend: str | None, db_path: Path | None) -> None:
    """Coffee DMS: coffee bean lot inventory"""
    try:
        settings = load_settings()
        if backend is not None:
            settings = replace(settings, backend=backend.lower())
        if db_path is not None:
            settings = replace(settings, db_path=db_path)
        set_level(settings.log_level)
    except ValueError as exc:
        raise click.ClickException(str(exc))
    ctx.obj = CliState(settings=settings)


@cli.group()
def lot() -> None:
    """Manage bean lots."""


@cli.command("menu")
@click.option(
    "--import",
    "import_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Import lots from this file before showing the menu.",
)
@pass_state
def menu(state: CliState, import_path: Path | None) -> None:
    """Run the interactive menu."""
    repo = state.repository()
    if import_path is not None:
        try:
            echo_import_summary(ImportLotsHandler(lot_repo=repo).handle(import_path))
        except DomainException as exc:
            raise click.ClickException(str(exc))
    InventoryMenu(repo).run()


# Register subcommands
lot.add_command(lot_add)
lot.add_command(lot_import)
lot.add_command(lot_list)
lot.add_command(lot_remove)
lot.add_command(lot_show)
lot.add_command(lot_update)
lot.add_command(lot_value)
