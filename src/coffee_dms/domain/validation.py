"""Field parsers for bean lot input.

Shared by the bulk importer and the interactive prompts so a value accepted
in one place is accepted in the other. Every parser takes raw text and
either returns a typed value or raises ValidationError naming the field.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from coffee_dms.domain.exceptions import ValidationError
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.roast_level import RoastLevel

FIELD_COUNT = 9


def require_text(value: str, field: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValidationError(f"{field} cannot be empty")
    return stripped


def parse_roast_date(text: str) -> date:
    """Parse an ISO 8601 calendar date (``YYYY-MM-DD``)."""
    raw = text.strip()
    try:
        # strptime alone would also take "2024-3-1"
        if len(raw) != 10:
            raise ValueError(raw)
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(
            f"Invalid roast date: {text!r} (expected YYYY-MM-DD)"
        ) from exc


def _parse_non_negative_float(text: str, field: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid {field}: {text!r} is not a number") from exc
    if not math.isfinite(value):
        raise ValidationError(f"Invalid {field}: {text!r} is not finite")
    if value < 0:
        raise ValidationError(f"{field.capitalize()} cannot be negative, got {value}")
    return abs(value) if value == 0 else value  # "-0" parses as -0.0


def parse_quantity(text: str) -> float:
    return _parse_non_negative_float(text, "quantity")


def parse_caffeine(text: str) -> float:
    return _parse_non_negative_float(text, "caffeine content")


def parse_cost(text: str) -> Decimal:
    """Parse a cost per kg as an exact Decimal."""
    try:
        value = Decimal(text.strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid cost: {text!r} is not a number") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid cost: {text!r} is not finite")
    if value < Decimal("0"):
        raise ValidationError(f"Cost cannot be negative, got {value}")
    return value.copy_abs() if value.is_zero() else value  # "-0" parses as -0


def parse_lot_line(line: str) -> BeanLot:
    """Parse one import line.

    Format: ``id,origin,farm,roast,YYYY-MM-DD,quantity,cost,notes,caffeine``.
    There is no quoting, so a comma inside a value shifts the field count
    and the line is rejected.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != FIELD_COUNT:
        raise ValidationError(
            f"Expected {FIELD_COUNT} comma-separated fields, got {len(parts)}"
        )

    return BeanLot(
        lot_id=require_text(parts[0], "Lot ID"),
        origin_country=require_text(parts[1], "Origin country"),
        farm_name=require_text(parts[2], "Farm name"),
        roast_level=RoastLevel.parse(parts[3]),
        roast_date=parse_roast_date(parts[4]),
        quantity_kg=parse_quantity(parts[5]),
        cost_per_kg=parse_cost(parts[6]),
        flavor_notes=require_text(parts[7], "Flavor notes"),
        caffeine_mg_per_g=parse_caffeine(parts[8]),
    )
