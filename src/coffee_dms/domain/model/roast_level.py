"""Roast level of a bean lot."""

from __future__ import annotations

from enum import Enum

from coffee_dms.domain.exceptions import InvalidCategory


class RoastLevel(Enum):
    LIGHT = "LIGHT"
    MEDIUM = "MEDIUM"
    DARK = "DARK"

    @classmethod
    def parse(cls, text: str) -> RoastLevel:
        """Match *text* case-insensitively, ignoring surrounding whitespace.

        Raises InvalidCategory when nothing matches (including "").
        """
        candidate = text.strip().upper()
        for level in cls:
            if level.value == candidate:
                return level
        raise InvalidCategory(
            f"Invalid roast level: {text!r} (expected one of {cls.choices()})"
        )

    @classmethod
    def choices(cls) -> str:
        return "/".join(level.value for level in cls)

    def __str__(self) -> str:
        return self.value
