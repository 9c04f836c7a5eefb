"""Unit tests for domain value objects."""

from decimal import Decimal, localcontext

import pytest

from coffee_dms.domain.exceptions import ValidationError
from coffee_dms.domain.model.value_objects import EXACT_CONTEXT, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_str_formatting(self):
        assert str(Money(Decimal("15"))) == "$15.00"
        assert str(Money(Decimal("9.5"))) == "$9.50"
        assert str(Money(Decimal("1234.5"))) == "$1,234.50"

    def test_str_rounds_only_for_display(self):
        m = Money(Decimal("33.29667"))
        assert str(m) == "$33.30"
        assert m.amount == Decimal("33.29667")

    def test_negative_zero_displays_unsigned(self):
        assert str(Money(Decimal("-0"))) == "$0.00"
        assert str(Money(Decimal("-0.000"))) == "$0.00"


# ── Exact arithmetic ─────────────────────────────────────────────────────────


class TestExactContext:

    def test_keeps_digits_the_default_context_drops(self):
        big = Decimal("1000000000000000000000000000")
        with localcontext(EXACT_CONTEXT):
            assert big + Decimal("0.01") == Decimal("1000000000000000000000000000.01")

