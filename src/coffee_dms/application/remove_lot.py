"""Application service: Remove Lot use case."""

from __future__ import annotations

from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.logger import get_logger

logger = get_logger(__name__)


class RemoveLotHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self, lot_id: str) -> bool:
        removed = self._lot_repo.remove(lot_id.strip())
        if removed:
            logger.info("Removed lot %s", lot_id)
        return removed
