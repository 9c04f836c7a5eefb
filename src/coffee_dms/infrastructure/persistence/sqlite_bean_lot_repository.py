"""SQLite-backed implementation of BeanLotRepository.

One table, keyed by ``bean_id``. Costs are stored as decimal strings and
the inventory total is computed inside SQLite by two registered functions,
so the sum never goes through a float.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from decimal import Decimal, localcontext
from pathlib import Path

from coffee_dms.domain.exceptions import StorageError
from coffee_dms.domain.model.bean_lot import BeanLot
from coffee_dms.domain.model.roast_level import RoastLevel
from coffee_dms.domain.model.value_objects import EXACT_CONTEXT
from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.logger import get_logger

logger = get_logger(__name__)

MEMORY = ":memory:"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS bean_lots (
    bean_id             TEXT PRIMARY KEY,
    origin              TEXT NOT NULL,
    farm                TEXT NOT NULL,
    roast_level         TEXT NOT NULL CHECK (roast_level IN ('LIGHT', 'MEDIUM', 'DARK')),
    roast_date          TEXT NOT NULL,
    quantity_kg         REAL NOT NULL,
    cost_per_kg         TEXT NOT NULL,
    notes               TEXT NOT NULL,
    caffeine_mg_per_g   REAL NOT NULL
)
"""

_COLUMNS = (
    "bean_id, origin, farm, roast_level, roast_date, "
    "quantity_kg, cost_per_kg, notes, caffeine_mg_per_g"
)


def _lot_value(quantity_kg: float, cost_per_kg: str) -> str:
    with localcontext(EXACT_CONTEXT):
        return str(Decimal(repr(float(quantity_kg))) * Decimal(cost_per_kg))


class _DecimalSum:
    """SQLite aggregate summing decimal strings exactly."""

    def __init__(self) -> None:
        self._total = Decimal("0")

    def step(self, value: str | None) -> None:
        if value is not None:
            with localcontext(EXACT_CONTEXT):
                self._total += Decimal(value)

    def finalize(self) -> str:
        return str(self._total)


class SqliteBeanLotRepository(BeanLotRepository):

    def __init__(self, db_path: Path | str = MEMORY) -> None:
        self._db_path = str(db_path)
        self._conn = self._connect()

    # --- BeanLotRepository interface ------------------------------------------

    def find_all(self) -> list[BeanLot]:
        rows = self._query(f"SELECT {_COLUMNS} FROM bean_lots ORDER BY rowid")
        return [self._to_domain(row) for row in rows]

    def find(self, lot_id: str) -> BeanLot | None:
        rows = self._query(
            f"SELECT {_COLUMNS} FROM bean_lots WHERE bean_id = ?", (lot_id,)
        )
        return self._to_domain(rows[0]) if rows else None

    def add(self, lot: BeanLot) -> bool:
        try:
            with self._conn:
                self._conn.execute(
                    f"INSERT INTO bean_lots ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    self._to_row(lot),
                )
        except sqlite3.IntegrityError as exc:
            if "bean_lots.bean_id" in str(exc):
                return False
            raise StorageError(f"Could not add lot '{lot.lot_id}': {exc}") from exc
        except sqlite3.Error as exc:
            raise StorageError(f"Could not add lot '{lot.lot_id}': {exc}") from exc
        return True

    def update(self, lot: BeanLot) -> bool:
        row = self._to_row(lot)
        return self._execute(
            "UPDATE bean_lots SET origin = ?, farm = ?, roast_level = ?, "
            "roast_date = ?, quantity_kg = ?, cost_per_kg = ?, notes = ?, "
            "caffeine_mg_per_g = ? WHERE bean_id = ?",
            row[1:] + row[:1],
        ) == 1

    def remove(self, lot_id: str) -> bool:
        return self._execute(
            "DELETE FROM bean_lots WHERE bean_id = ?", (lot_id,)
        ) == 1

    def total_value(self) -> Decimal:
        rows = self._query(
            "SELECT decimal_sum(lot_value(quantity_kg, cost_per_kg)) FROM bean_lots"
        )
        total = rows[0][0]
        # SQLite never calls the aggregate on an empty table and yields NULL
        return Decimal(total) if total is not None else Decimal("0")

    # --- Connection lifecycle -------------------------------------------------

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> SqliteBeanLotRepository:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(lot: BeanLot) -> tuple:
        return (
            lot.lot_id,
            lot.origin_country,
            lot.farm_name,
            lot.roast_level.value,
            lot.roast_date.isoformat(),
            lot.quantity_kg,
            str(lot.cost_per_kg),
            lot.flavor_notes,
            lot.caffeine_mg_per_g,
        )

    @staticmethod
    def _to_domain(row: sqlite3.Row) -> BeanLot:
        return BeanLot(
            lot_id=row["bean_id"],
            origin_country=row["origin"],
            farm_name=row["farm"],
            roast_level=RoastLevel(row["roast_level"]),
            roast_date=date.fromisoformat(row["roast_date"]),
            quantity_kg=float(row["quantity_kg"]),
            cost_per_kg=Decimal(row["cost_per_kg"]),
            flavor_notes=row["notes"],
            caffeine_mg_per_g=float(row["caffeine_mg_per_g"]),
        )

    # --- SQLite helpers -------------------------------------------------------

    def _connect(self) -> sqlite3.Connection:
        try:
            if self._db_path != MEMORY:
                Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self._db_path)
        except (sqlite3.Error, OSError) as exc:
            logger.error("Failed to open database %s: %s", self._db_path, exc)
            raise StorageError(f"Cannot open database {self._db_path}: {exc}") from exc

        try:
            conn.row_factory = sqlite3.Row
            conn.create_function("lot_value", 2, _lot_value)
            conn.create_aggregate("decimal_sum", 1, _DecimalSum)
            with conn:
                conn.execute(SCHEMA_SQL)
        except sqlite3.Error as exc:
            conn.close()
            logger.error("Failed to initialize database %s: %s", self._db_path, exc)
            raise StorageError(f"Cannot open database {self._db_path}: {exc}") from exc
        logger.info("Opened database %s", self._db_path)
        return conn

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Query failed: {exc}") from exc

    def _execute(self, sql: str, params: tuple) -> int:
        try:
            with self._conn:
                return self._conn.execute(sql, params).rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"Statement failed: {exc}") from exc
