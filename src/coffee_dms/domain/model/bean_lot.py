"""BeanLot record: one lot of coffee beans.

Lots are immutable. An "update" builds a complete new BeanLot with the same
``lot_id`` and hands it to the repository, which swaps it in whole.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext

from coffee_dms.domain.model.roast_level import RoastLevel
from coffee_dms.domain.model.value_objects import EXACT_CONTEXT


@dataclass(frozen=True)
class BeanLot:
    """A single lot in the inventory.

    The constructor does not validate; callers parse raw input through
    ``coffee_dms.domain.validation`` first. Uniqueness of ``lot_id`` is the
    repository's job.
    """

    lot_id: str
    origin_country: str
    farm_name: str
    roast_level: RoastLevel
    roast_date: date
    quantity_kg: float
    cost_per_kg: Decimal
    flavor_notes: str
    caffeine_mg_per_g: float

    def value(self) -> Decimal:
        """Return ``quantity_kg * cost_per_kg`` in exact decimal arithmetic.

        The quantity goes through its shortest repr so 3.333 counts as
        exactly 3.333, not its binary approximation. No digits are dropped,
        however long the cost is.
        """
        with localcontext(EXACT_CONTEXT):
            return Decimal(repr(self.quantity_kg)) * self.cost_per_kg

    def __str__(self) -> str:
        return (
            f"{self.lot_id} | {self.origin_country} | {self.farm_name} | "
            f"{self.roast_level} | {self.roast_date.isoformat()} | "
            f"{self.quantity_kg:.2f} kg | ${self.cost_per_kg}/kg | "
            f"{self.flavor_notes} | {self.caffeine_mg_per_g:.2f} mg/g"
        )
