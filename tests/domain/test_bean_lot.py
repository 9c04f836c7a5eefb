"""Unit tests for the BeanLot record."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from coffee_dms.domain.model.roast_level import RoastLevel
from tests.fakes import make_lot


class TestBeanLotValue:

    def test_value_is_quantity_times_cost(self):
        lot = make_lot(quantity_kg=10.0, cost_per_kg=Decimal("5.50"))
        assert lot.value() == Decimal("55.00")

    def test_value_is_exact_for_fractional_cents(self):
        lot = make_lot(quantity_kg=3.333, cost_per_kg=Decimal("9.99"))
        assert lot.value() == Decimal("33.29667")

    def test_value_keeps_every_digit_of_a_long_cost(self):
        lot = make_lot(
            quantity_kg=3.333,
            cost_per_kg=Decimal("0.1234567890123456789012345678"),
        )
        assert lot.value() == Decimal("0.4114814777781481477778148144774")

    def test_value_of_empty_lot_is_zero(self):
        lot = make_lot(quantity_kg=0.0)
        assert lot.value() == Decimal("0")

    def test_value_is_a_decimal(self):
        assert isinstance(make_lot().value(), Decimal)


class TestBeanLotImmutability:

    def test_fields_cannot_be_reassigned(self):
        lot = make_lot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            lot.farm_name = "Other"  # type: ignore[misc]

    def test_equal_by_value(self):
        assert make_lot("X") == make_lot("X")
        assert make_lot("X") != make_lot("Y")


class TestBeanLotDisplay:

    def test_str_has_all_nine_fields(self):
        lot = make_lot(
            lot_id="A1",
            roast_level=RoastLevel.DARK,
            roast_date=date(2024, 1, 15),
            quantity_kg=2.5,
            cost_per_kg=Decimal("7.25"),
            flavor_notes="chocolate",
            caffeine_mg_per_g=1.0,
        )
        assert str(lot) == (
            "A1 | Brazil | Fazenda | DARK | 2024-01-15 | 2.50 kg | "
            "$7.25/kg | chocolate | 1.00 mg/g"
        )
