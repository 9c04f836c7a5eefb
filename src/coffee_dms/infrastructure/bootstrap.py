"""Composition root: wires a concrete repository to the domain interface.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from coffee_dms.domain.repository.bean_lot_repository import BeanLotRepository
from coffee_dms.infrastructure.config import Settings
from coffee_dms.infrastructure.persistence.in_memory_bean_lot_repository import (
    InMemoryBeanLotRepository,
)
from coffee_dms.infrastructure.persistence.sqlite_bean_lot_repository import (
    SqliteBeanLotRepository,
)
from coffee_dms.logger import get_logger

logger = get_logger(__name__)


def bean_lot_repository(settings: Settings) -> BeanLotRepository:
    """Build the repository selected by ``settings.backend``.

    Raises StorageError if the SQLite database cannot be opened.
    """
    logger.info("Using %s backend", settings.backend)
    if settings.backend == "memory":
        return InMemoryBeanLotRepository()
    return SqliteBeanLotRepository(settings.db_path)
