"""Tests for settings loading and backend selection."""

import os

import pytest

from coffee_dms.infrastructure.bootstrap import bean_lot_repository
from coffee_dms.infrastructure.config import Settings, load_settings
from coffee_dms.infrastructure.persistence.in_memory_bean_lot_repository import (
    InMemoryBeanLotRepository,
)
from coffee_dms.infrastructure.persistence.sqlite_bean_lot_repository import (
    SqliteBeanLotRepository,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)
    for name in ("COFFEE_DMS_BACKEND", "COFFEE_DMS_DB_PATH", "COFFEE_DMS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings.backend == "sqlite"
        assert settings.db_path.name == "coffee_dms.db"
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("COFFEE_DMS_BACKEND", " Memory ")
        monkeypatch.setenv("COFFEE_DMS_DB_PATH", str(tmp_path / "x.db"))
        monkeypatch.setenv("COFFEE_DMS_LOG_LEVEL", "INFO")

        settings = load_settings()
        assert settings.backend == "memory"
        assert settings.db_path == tmp_path / "x.db"
        assert settings.log_level == "INFO"

    def test_dotenv_file_is_read(self, tmp_path):
        (tmp_path / ".env").write_text("COFFEE_DMS_BACKEND=memory\n", encoding="utf-8")
        try:
            assert load_settings().backend == "memory"
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("COFFEE_DMS_BACKEND", None)

    def test_unknown_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("COFFEE_DMS_BACKEND", "mysql")
        with pytest.raises(ValueError, match="Unknown backend 'mysql'"):
            load_settings()


class TestBootstrap:

    def test_memory_backend(self):
        repo = bean_lot_repository(Settings(backend="memory"))
        assert isinstance(repo, InMemoryBeanLotRepository)

    def test_sqlite_backend(self, tmp_path):
        repo = bean_lot_repository(Settings(backend="sqlite", db_path=tmp_path / "a.db"))
        try:
            assert isinstance(repo, SqliteBeanLotRepository)
        finally:
            repo.close()
