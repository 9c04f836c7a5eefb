"""
config.py
---------
Runtime settings. Loads a ``.env`` file (searched upward from the working directory), then reads the
``COFFEE_DMS_*`` environment variables. CLI options override these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

BACKENDS = ("memory", "sqlite")

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    backend: str = "sqlite"
    db_path: Path = _DATA_DIR / "coffee_dms.db"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown backend {self.backend!r} (expected one of {', '.join(BACKENDS)})"
            )


def load_settings() -> Settings:
    """Build Settings from the environment (and ``.env``)."""
    load_dotenv(find_dotenv(usecwd=True))
    defaults = Settings()
    return Settings(
        backend=os.getenv("COFFEE_DMS_BACKEND", defaults.backend).strip().lower(),
        db_path=Path(os.getenv("COFFEE_DMS_DB_PATH", str(defaults.db_path))),
        log_level=os.getenv("COFFEE_DMS_LOG_LEVEL", defaults.log_level),
    )
