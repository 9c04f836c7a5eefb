"""Application service: Import Lots use case.

Reads a line-delimited file and feeds it to the repository's bulk import.
Bad lines never abort the batch; they come back in the summary's
``skipped`` list (and are logged by the repository).
"""

from __future__ import annotations

from pathlib import Path

from coffee_dms.application.dto import ImportSummaryDTO, to_dto
from coffee_dms.domain.exceptions import ImportFileError
from coffee_dms.domain.repository.bean_lot_repository import (
    BeanLotRepository,
    SkippedLine,
)


class ImportLotsHandler:

    def __init__(self, lot_repo: BeanLotRepository) -> None:
        self._lot_repo = lot_repo

    def handle(self, path: Path | str) -> ImportSummaryDTO:
        """Import every valid, new lot from the file at *path*.

        Raises ImportFileError if the file cannot be opened or decoded.
        """
        skipped: list[SkippedLine] = []
        try:
            with open(path, encoding="utf-8") as source:
                imported = self._lot_repo.bulk_import(source, on_skip=skipped.append)
        except (OSError, UnicodeDecodeError) as exc:
            raise ImportFileError(f"Cannot read {path}: {exc}") from exc

        return ImportSummaryDTO(
            imported=[to_dto(lot) for lot in imported],
            skipped=skipped,
        )
