"""Interactive menu for managing bean lots.

Loops until the user picks Exit. Every prompt validates its own field and
asks again on bad input; errors from an operation are printed and control
goes back to the menu.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from coffee_dms.application.add_lot import AddLotHandler
from coffee_dms.application.calculate_inventory_value import (
    CalculateInventoryValueHandler,
)
from coffee_dms.application.import_lots import ImportLotsHandler
from coffee_dms.application.list_lots import ListLotsHandler
from coffee_dms.application.remove_lot import RemoveLotHandler
from coffee_dms.application.show_lot import ShowLotHandler
from coffee_dms.application.update_lot import UpdateLotHandler
from coffee_dms.domain.exceptions import DomainException
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.roast_level import RoastLevel
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.domain.validation import (
    parse_caffeine,
    parse_cost,
    parse_quantity,
    parse_roast_date,
    require_text,
)
from coffee_dms.infrastructure.cli.context import value_proc
from coffee_dms.infrastructure.cli.lot_commands import echo_import_summary

EXIT = "8"


def _prompt(text: str, parser: Callable[[str], object], default: str | None = None):
    return click.prompt(text, default=default, value_proc=value_proc(parser))


def _prompt_text(text: str, default: str | None = None) -> str:
    return _prompt(text, lambda value: require_text(value, text), default)


class InventoryMenu:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo
        self._actions: dict[str, tuple[str, Callable[[], None]]] = {
            "1": ("Add bean lot", self._add),
            "2": ("Import bean lots from file", self._import),
            "3": ("Remove bean lot", self._remove),
            "4": ("Update bean lot", self._update),
            "5": ("View all bean lots", self._view),
            "6": ("Find bean lot", self._find),
            "7": ("Calculate inventory value", self._calculate),
        }

    def run(self) -> None:
        while True:
            click.echo()
            click.echo("=== Coffee Bean DMS ===")
            for key, (label, _) in self._actions.items():
                click.echo(f"{key}) {label}")
            click.echo(f"{EXIT}) Exit")

            choice = click.prompt("Select an option", default="", show_default=False).strip()
            if choice == EXIT:
                click.echo("Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid option, please try again.")
                continue

            try:
                action[1]()
            except DomainException as exc:
                click.echo(f"Error: {exc}", err=True)

    # --- Actions --------------------------------------------------------------

    def _add(self) -> None:
        lot = self._prompt_lot(_prompt_text("Lot ID"))
        added = AddLotHandler(self._lot_repo).handle(lot)
        click.echo("Lot added." if added else f"Lot '{lot.lot_id}' already exists.")

    def _import(self) -> None:
        path = _prompt_text("File path")
        summary = ImportLotsHandler(self._lot_repo).handle(path)
        echo_import_summary(summary)

    def _remove(self) -> None:
        lot_id = _prompt_text("Lot ID")
        removed = RemoveLotHandler(self._lot_repo).handle(lot_id)
        click.echo("Lot removed." if removed else "No lot with that ID.")

    def _update(self) -> None:
        lot_id = _prompt_text("Lot ID")
        handler = UpdateLotHandler(self._lot_repo)
        existing = handler.find(lot_id)
        if existing is None:
            click.echo("No lot with that ID.")
            return
        click.echo("Enter new values (press Enter to keep the current one):")
        updated = handler.handle(
            self._prompt_lot(lot_id, current=existing)
        )
        click.echo("Lot updated." if updated else "Update failed.")

    def _view(self) -> None:
        lots = ListLotsHandler(self._lot_repo).handle()
        if not lots:
            click.echo("No lots to display.")
            return
        for dto in lots:
            click.echo(dto.line)

    def _find(self) -> None:
        dto = ShowLotHandler(self._lot_repo).handle(_prompt_text("Lot ID"))
        if dto is None:
            click.echo("No lot with that ID.")
            return
        click.echo(dto.line)
        click.echo(f"Value: {dto.value}")

    def _calculate(self) -> None:
        dto = CalculateInventoryValueHandler(self._lot_repo).handle()
        click.echo(f"Total inventory value: {dto.total}")

    # --- Prompts --------------------------------------------------------------

    @staticmethod
    def _prompt_lot(lot_id: str, current: BeanLot | None = None) -> BeanLot:
        """Ask for every field but the ID; *current* supplies defaults."""

        def default(attr: str) -> str | None:
            return None if current is None else str(getattr(current, attr))

        return BeanLot(
            lot_id=lot_id,
            origin_country=_prompt_text("Origin country", default("origin_country")),
            farm_name=_prompt_text("Farm name", default("farm_name")),
            roast_level=_prompt(
                f"Roast level ({RoastLevel.choices()})",
                RoastLevel.parse,
                default("roast_level"),
            ),
            roast_date=_prompt(
                "Roast date (YYYY-MM-DD)", parse_roast_date, default("roast_date")
            ),
            quantity_kg=_prompt("Quantity (kg)", parse_quantity, default("quantity_kg")),
            cost_per_kg=_prompt("Cost per kg", parse_cost, default("cost_per_kg")),
            flavor_notes=_prompt_text("Flavor notes", default("flavor_notes")),
            caffeine_mg_per_g=_prompt(
                "Caffeine (mg per gram)", parse_caffeine, default("caffeine_mg_per_g")
            ),
        )
