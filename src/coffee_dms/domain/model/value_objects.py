"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)

from coffee_dms.domain.exceptions import ValidationError

# Context for inventory arithmetic. Products and sums of finite decimals
# fit without rounding at this precision; Inexact raises if one ever does not.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)


@dataclass(frozen=True)
class Money:
    """Monetary amount in dollars.

    Uses Decimal to avoid floating-point rounding errors; inventory totals
    are summed across many lots and must stay exact. Rounding to cents
    happens only in ``__str__``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # -0 compares equal to 0 but would print as "$-0.00"
        amount = self.amount.copy_abs() if self.amount.is_zero() else self.amount
        return f"${amount:,.2f}"
