"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.value_objects import Money
from coffee_dms.domain.repository.bean_lot_repository import SkippedLine


@dataclass(frozen=True)
class LotDTO:
    """Output: a single lot as displayed to the user."""

    lot_id: str
    origin_country: str
    farm_name: str
    roast_level: str
    roast_date: str
    quantity: str  # formatted, e.g. "10.00 kg"
    cost_per_kg: str  # e.g. "$5.50/kg"
    flavor_notes: str
    caffeine: str  # e.g. "1.20 mg/g"
    value: str  # e.g. "$55.00"
    line: str  # every field on one line, as BeanLot prints itself


@dataclass(frozen=True)
class InventoryValueDTO:
    """Output: the total value of every lot."""

    lot_count: int
    total: str  # formatted, e.g. "$55.00"


@dataclass(frozen=True)
class ImportSummaryDTO:
    """Output: what a bulk import did."""

    imported: list[LotDTO]
    skipped: list[SkippedLine]


def to_dto(lot: BeanLot) -> LotDTO:
    return LotDTO(
        lot_id=lot.lot_id,
        origin_country=lot.origin_country,
        farm_name=lot.farm_name,
        roast_level=lot.roast_level.value,
        roast_date=lot.roast_date.isoformat(),
        quantity=f"{lot.quantity_kg:.2f} kg",
        cost_per_kg=f"${lot.cost_per_kg}/kg",
        flavor_notes=lot.flavor_notes,
        caffeine=f"{lot.caffeine_mg_per_g:.2f} mg/g",
        value=str(Money(lot.value())),
        line=str(lot),
    )
