"""Application service: Update Lot use case."""

from __future__ import annotations

from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.logger import get_logger

logger = get_logger(__name__)


class UpdateLotHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def find(self, lot_id: str) -> BeanLot | None:
        """Return the stored lot to be replaced, or None if the ID is unknown."""
        return self._lot_repo.find(lot_id.strip())

    def handle(self, lot: BeanLot) -> bool:
        """Replace the stored lot that has ``lot.lot_id`` with *lot*.

        Every field is taken from the argument; there is no partial
        update. Returns False (and inserts nothing) if the ID is unknown.
        """
        updated = self._lot_repo.update(lot)
        if updated:
            logger.info("Updated lot %s", lot.lot_id)
        return updated
