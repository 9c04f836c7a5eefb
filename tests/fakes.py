"""Test doubles and builders for bean lots.

``make_lot`` builds a valid BeanLot with overridable fields.
``FailingBeanLotRepository`` implements the repository interface but
every call fails the way an unreachable database would.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from coffee_dms.domain.exceptions import StorageError
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.roast_level import RoastLevel
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository


def make_lot(lot_id: str = "A1", **overrides) -> BeanLot:
    fields = dict(
        lot_id=lot_id,
        origin_country="Brazil",
        farm_name="Fazenda",
        roast_level=RoastLevel.LIGHT,
        roast_date=date(2024, 3, 1),
        quantity_kg=10.0,
        cost_per_kg=Decimal("5.50"),
        flavor_notes="fruity",
        caffeine_mg_per_g=1.2,
    )
    fields.update(overrides)
    return BeanLot(**fields)


class FailingBeanLotRepository(BeanLotRepository):

    def _fail(self):
        raise StorageError("database is unreachable")

    def find_all(self) -> list[BeanLot]:
        self._fail()

    def find(self, lot_id: str) -> BeanLot | None:
        self._fail()

    def add(self, lot: BeanLot) -> bool:
        self._fail()

    def update(self, lot: BeanLot) -> bool:
        self._fail()

    def remove(self, lot_id: str) -> bool:
        self._fail()

    def total_value(self) -> Decimal:
        self._fail()
