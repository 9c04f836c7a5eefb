"""Application service: Show Lot use case (query)."""

from __future__ import annotations

from coffee_dms.application.dto import LotDTO, to_dto
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository


class ShowLotHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self, lot_id: str) -> LotDTO | None:
        lot = self._lot_repo.find(lot_id.strip())
        return to_dto(lot) if lot is not None else None
