"""Integration tests for the ImportLots use case."""

from decimal import Decimal

import pytest

from coffee_dms.application.import_lots import ImportLotsHandler
from coffee_dms.domain.exceptions import ImportFileError
from coffee_dms.infrastructure.persistence.in_memory_bean_lot_repository import (
    InMemoryBeanLotRepository,
)


def _write(tmp_path, *lines: str):
    path = tmp_path / "beans.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestImportLots:

    def test_imports_file(self, tmp_path):
        path = _write(
            tmp_path,
            "ID1,Country1,Farm1,LIGHT,2025-01-01,1.0,5.0,notes1,0.1",
            "ID2,Country2,Farm2,MEDIUM,2025-02-02,2.0,6.0,notes2,0.2",
        )
        repo = InMemoryBeanLotRepository()

        summary = ImportLotsHandler(repo).handle(path)

        assert [dto.lot_id for dto in summary.imported] == ["ID1", "ID2"]
        assert summary.skipped == []
        assert repo.find("ID1").roast_date.isoformat() == "2025-01-01"

    def test_three_line_batch_with_bad_date_and_duplicate(self, tmp_path):
        path = _write(
            tmp_path,
            "A1,Brazil,Fazenda,LIGHT,2024-03-01,10.0,5.50,fruity,1.2",
            "B2,Kenya,Nyeri,MEDIUM,not-a-date,1.0,2.00,citrus,0.9",
            "A1,Other,Other,DARK,2024-01-01,1.0,1.00,x,0.1",
        )
        repo = InMemoryBeanLotRepository()

        summary = ImportLotsHandler(repo).handle(path)

        assert [dto.lot_id for dto in summary.imported] == ["A1"]
        assert [s.line_number for s in summary.skipped] == [2, 3]
        assert repo.total_value() == Decimal("55.00")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImportFileError, match="Cannot read"):
            ImportLotsHandler(InMemoryBeanLotRepository()).handle(tmp_path / "nope.txt")
