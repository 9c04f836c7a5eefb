"""Application service: List Lots use case (query)."""

from __future__ import annotations

from coffee_dms.application.dto import LotDTO, to_dto
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository


class ListLotsHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self) -> list[LotDTO]:
        return [to_dto(lot) for lot in self._lot_repo.find_all()]
