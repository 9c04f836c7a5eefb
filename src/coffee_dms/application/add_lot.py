"""Application service: Add Lot use case."""

from __future__ import annotations

from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.logger import get_logger

logger = get_logger(__name__)


class AddLotHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self, lot: BeanLot) -> bool:
        """Add a new lot. Returns False if the lot ID is already in use."""
        added = self._lot_repo.add(lot)
        if added:
            logger.info("Added lot %s", lot.lot_id)
        else:
            logger.info("Lot %s already exists", lot.lot_id)
        return added
