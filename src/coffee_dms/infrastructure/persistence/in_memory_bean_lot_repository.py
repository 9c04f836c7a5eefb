"""In-memory implementation of BeanLotRepository.

Lots are kept in a list (display order) with a dict index on ``lot_id``.
Nothing survives the process.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.value_objects import EXACT_CONTEXT
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository


class InMemoryBeanLotRepository(BeanLotRepository):

    def __init__(self, lots: list[BeanLot] | None = None) -> None:
        self._lots: list[BeanLot] = []
        self._index: dict[str, BeanLot] = {}
        for lot in lots or []:
            self.add(lot)

    # --- BeanLotRepository interface ------------------------------------------

    def find_all(self) -> list[BeanLot]:
        return list(self._lots)

    def find(self, lot_id: str) -> BeanLot | None:
        return self._index.get(lot_id)

    def add(self, lot: BeanLot) -> bool:
        if lot.lot_id in self._index:
            return False
        self._lots.append(lot)
        self._index[lot.lot_id] = lot
        return True

    def update(self, lot: BeanLot) -> bool:
        if lot.lot_id not in self._index:
            return False
        self._lots[self._position(lot.lot_id)] = lot
        self._index[lot.lot_id] = lot
        return True

    def remove(self, lot_id: str) -> bool:
        if lot_id not in self._index:
            return False
        del self._lots[self._position(lot_id)]
        del self._index[lot_id]
        return True

    def total_value(self) -> Decimal:
        total = Decimal("0")
        with localcontext(EXACT_CONTEXT):
            for lot in self._lots:
                total += lot.value()
        return total

    # --- Helpers --------------------------------------------------------------

    def _position(self, lot_id: str) -> int:
        for i, lot in enumerate(self._lots):
            if lot.lot_id == lot_id:
                return i
        raise KeyError(lot_id)  # index and list out of sync

    def __len__(self) -> int:
        return len(self._lots)
