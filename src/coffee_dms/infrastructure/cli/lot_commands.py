"""CLI commands for bean lots (one command per operation)."""

from __future__ import annotations

from pathlib import Path

import click

from coffee_dms.application.add_lot import AddLotHandler
from coffee_dms.application.calculate_inventory_value import (
    CalculateInventoryValueHandler,
)
from coffee_dms.application.dto import ImportSummaryDTO
from coffee_dms.application.import_lots import ImportLotsHandler
from coffee_dms.application.list_lots import ListLotsHandler
from coffee_dms.application.remove_lot import RemoveLotHandler
from coffee_dms.application.show_lot import ShowLotHandler
from coffee_dms.application.update_lot import UpdateLotHandler
from coffee_dms.domain.exceptions import DomainException
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.roast_level import RoastLevel
from coffee_dms.domain.validation import (
    parse_caffeine,
    parse_cost,
    parse_quantity,
    parse_roast_date,
    require_text,
)
from coffee_dms.infrastructure.cli.context import CliState, pass_state, validated


def _text(field: str):
    return validated(lambda value: require_text(value, field))


def _lot_options(func):
    """Attach the nine lot fields as required options."""
    options = [
        click.option("--id", "lot_id", required=True, callback=_text("Lot ID"), help="Lot ID."),
        click.option("--origin", required=True, callback=_text("Origin country"), help="Origin country."),
        click.option("--farm", required=True, callback=_text("Farm name"), help="Farm or cooperative name."),
        click.option("--roast", required=True, callback=validated(RoastLevel.parse), help=f"Roast level ({RoastLevel.choices()})."),
        click.option("--roast-date", required=True, callback=validated(parse_roast_date), help="Roast date (YYYY-MM-DD)."),
        click.option("--quantity", required=True, callback=validated(parse_quantity), help="Quantity in kg."),
        click.option("--cost", required=True, callback=validated(parse_cost), help="Cost per kg (e.g. 5.50)."),
        click.option("--notes", required=True, callback=_text("Flavor notes"), help="Flavor notes."),
        click.option("--caffeine", required=True, callback=validated(parse_caffeine), help="Caffeine in mg per gram."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_lot(
    lot_id, origin, farm, roast, roast_date, quantity, cost, notes, caffeine
) -> BeanLot:
    return BeanLot(
        lot_id=lot_id,
        origin_country=origin,
        farm_name=farm,
        roast_level=roast,
        roast_date=roast_date,
        quantity_kg=quantity,
        cost_per_kg=cost,
        flavor_notes=notes,
        caffeine_mg_per_g=caffeine,
    )


def echo_import_summary(summary: ImportSummaryDTO) -> None:
    """Shared formatting for the result of a bulk import."""
    if summary.imported:
        click.echo(f"{len(summary.imported)} lot(s) imported.")
    else:
        click.echo("No valid lots found to import.")
    if summary.skipped:
        click.echo(f"{len(summary.skipped)} line(s) skipped:")
        for skipped in summary.skipped:
            click.echo(f"  line {skipped.line_number}: {skipped.reason}")


@click.command("add")
@_lot_options
@pass_state
def lot_add(state: CliState, **fields) -> None:
    """Add a new bean lot."""
    handler = AddLotHandler(lot_repo=state.repository())

    try:
        added = handler.handle(_build_lot(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not added:
        raise click.ClickException(f"Lot '{fields['lot_id']}' already exists")
    click.echo(f"Lot '{fields['lot_id']}' added.")


@click.command("update")
@_lot_options
@pass_state
def lot_update(state: CliState, **fields) -> None:
    """Replace every field of an existing bean lot."""
    handler = UpdateLotHandler(lot_repo=state.repository())

    try:
        updated = handler.handle(_build_lot(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"No lot with ID '{fields['lot_id']}'")
    click.echo(f"Lot '{fields['lot_id']}' updated.")


@click.command("remove")
@click.option("--id", "lot_id", required=True, callback=_text("Lot ID"), help="Lot ID to remove.")
@pass_state
def lot_remove(state: CliState, lot_id: str) -> None:
    """Remove a bean lot."""
    handler = RemoveLotHandler(lot_repo=state.repository())

    try:
        removed = handler.handle(lot_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not removed:
        raise click.ClickException(f"No lot with ID '{lot_id}'")
    click.echo(f"Lot '{lot_id}' removed.")


@click.command("show")
@click.option("--id", "lot_id", required=True, callback=_text("Lot ID"), help="Lot ID to display.")
@pass_state
def lot_show(state: CliState, lot_id: str) -> None:
    """Show one bean lot."""
    handler = ShowLotHandler(lot_repo=state.repository())

    try:
        dto = handler.handle(lot_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"No lot with ID '{lot_id}'")
    click.echo(dto.line)
    click.echo(f"Value: {dto.value}")


@click.command("list")
@pass_state
def lot_list(state: CliState) -> None:
    """List all bean lots."""
    handler = ListLotsHandler(lot_repo=state.repository())

    try:
        lots = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lots:
        click.echo("No lots found.")
        return

    for dto in lots:
        click.echo(dto.line)


@click.command("import")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@pass_state
def lot_import(state: CliState, path: Path) -> None:
    """Import lots from a file with one comma-separated lot per line."""
    handler = ImportLotsHandler(lot_repo=state.repository())

    try:
        summary = handler.handle(path)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_import_summary(summary)


@click.command("value")
@pass_state
def lot_value(state: CliState) -> None:
    """Show the total inventory value."""
    handler = CalculateInventoryValueHandler(lot_repo=state.repository())

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total inventory value: {dto.total} ({dto.lot_count} lot(s))")
