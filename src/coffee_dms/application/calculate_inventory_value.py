"""Application service: Calculate Inventory Value use case (query)."""

from __future__ import annotations

from coffee_dms.application.dto import InventoryValueDTO
from coffee_dms.domain.model.value_objects import Money
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository


class CalculateInventoryValueHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self) -> InventoryValueDTO:
        """Total ``quantity * cost`` across every lot, formatted as currency.

        The repository sums exactly; rounding to cents happens only here,
        for display.
        """
        total = Money(self._lot_repo.total_value())
        return InventoryValueDTO(
            lot_count=len(self._lot_repo.find_all()),
            total=str(total),
        )
