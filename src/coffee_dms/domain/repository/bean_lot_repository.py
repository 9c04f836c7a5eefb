"""Abstract repository for BeanLot records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, SQLite)
live in the infrastructure layer and are chosen at startup.

Contract shared by every implementation:

- ``lot_id`` is unique across the repository at all times.
- A duplicate add, or an update/remove of an unknown id, is reported
  through the return value, never raised.
- ``find_all`` returns a snapshot; later mutations do not leak into it.
- ``total_value`` is exact decimal arithmetic end to end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from coffee_dms.domain.exceptions import ValidationError
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.validation import parse_lot_line
from coffee_dms.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SkippedLine:
    """An import line that did not make it into the repository."""

    line_number: int
    text: str
    reason: str


class BeanLotRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[BeanLot]:
        """Return a copy of every lot, in insertion order."""

    @abstractmethod
    def find(self, lot_id: str) -> BeanLot | None:
        """Return the lot with this ID, or None if not found."""

    @abstractmethod
    def add(self, lot: BeanLot) -> bool:
        """Insert a lot. Returns False if the ID is already taken."""

    @abstractmethod
    def update(self, lot: BeanLot) -> bool:
        """Replace the lot with the same ID. Returns False if there is none."""

    @abstractmethod
    def remove(self, lot_id: str) -> bool:
        """Delete the lot with this ID. Returns False if there is none."""

    @abstractmethod
    def total_value(self) -> Decimal:
        """Sum of ``quantity_kg * cost_per_kg`` over every lot."""

    # --- Bulk import ----------------------------------------------------------

    def bulk_import(
        self,
        source: str | Iterable[str],
        on_skip: Callable[[SkippedLine], None] | None = None,
    ) -> list[BeanLot]:
        """Parse line-delimited lot data and add every valid, new lot.

        Malformed lines and lines whose ID already exists are skipped and
        logged; the rest of the batch still goes in. Blank lines are
        ignored. Returns only the lots actually inserted.

        Args:
            source: The whole text, or an iterable of lines (e.g. an open file).
            on_skip: Optional callback receiving a SkippedLine per rejected line.
        """
        lines = source.splitlines() if isinstance(source, str) else source
        imported: list[BeanLot] = []

        for line_number, line in enumerate(lines, start=1):
            text = line.rstrip("\r\n")
            if not text.strip():
                continue

            try:
                lot = parse_lot_line(text)
            except ValidationError as exc:
                self._skip(SkippedLine(line_number, text, str(exc)), on_skip)
                continue

            if not self.add(lot):
                self._skip(
                    SkippedLine(line_number, text, f"Duplicate lot ID '{lot.lot_id}'"),
                    on_skip,
                )
                continue

            imported.append(lot)

        logger.info("Imported %d lot(s)", len(imported))
        return imported

    @staticmethod
    def _skip(
        skipped: SkippedLine,
        on_skip: Callable[[SkippedLine], None] | None,
    ) -> None:
        logger.warning(
            "Skipping invalid line %d: %s (%s)",
            skipped.line_number,
            skipped.text,
            skipped.reason,
        )
        if on_skip is not None:
            on_skip(skipped)
