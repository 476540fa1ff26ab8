"""Tests for storage settings and DatabaseManager."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy import text

from mobs.infra.persistence.database import (
    DatabaseManager,
    StorageSettings,
    get_database_manager,
    get_storage_settings,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture()
def _clear_caches() -> Iterator[None]:
    get_storage_settings.cache_clear()
    get_database_manager.cache_clear()
    yield
    get_storage_settings.cache_clear()
    get_database_manager.cache_clear()


@pytest.mark.unit
class TestStorageSettings:
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = StorageSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.data_dir == Path("./data")
        assert settings.database_file == "mobs.db"
        assert settings.region == "us-east-1"
        assert settings.echo is False

    def test_reads_environment(self) -> None:
        env = {
            "MOBS_DATA_DIR": "/var/lib/mobs",
            "MOBS_DATABASE_FILE": "tenants.db",
            "MOBS_REGION": "ap-southeast-1",
            "MOBS_ECHO": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = StorageSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.data_dir == Path("/var/lib/mobs")
        assert settings.database_file == "tenants.db"
        assert settings.region == "ap-southeast-1"
        assert settings.echo is True

    def test_invalid_region_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be a valid AWS region code"):
            StorageSettings(region="moon-base")

    def test_database_url(self, tmp_path: Path) -> None:
        settings = StorageSettings(data_dir=tmp_path, database_file="t.db")
        assert settings.database_path == tmp_path / "t.db"
        assert settings.database_url == f"sqlite:///{(tmp_path / 't.db').as_posix()}"


@pytest.mark.unit
class TestCachedAccessors:
    @pytest.mark.usefixtures("_clear_caches")
    def test_settings_cached(self) -> None:
        assert get_storage_settings() is get_storage_settings()

    @pytest.mark.usefixtures("_clear_caches")
    def test_manager_uses_cached_settings(self) -> None:
        with patch.dict("os.environ", {"MOBS_REGION": "eu-west-1"}):
            manager = get_database_manager()
        assert manager.settings.region == "eu-west-1"
        assert get_database_manager() is manager


@pytest.mark.integration
class TestDatabaseManager:
    def test_ensure_data_dir_creates_parents(self, tmp_path: Path) -> None:
        manager = DatabaseManager(StorageSettings(data_dir=tmp_path / "a" / "b"))
        path = manager.ensure_data_dir()
        assert path.is_dir()

    def test_engine_and_factory_are_lazy_singletons(
        self, database_manager: DatabaseManager
    ) -> None:
        assert database_manager.get_engine() is database_manager.get_engine()
        assert database_manager.get_session_factory() is database_manager.get_session_factory()

    def test_session_executes(self, database_manager: DatabaseManager) -> None:
        with database_manager.get_session_factory()() as session:
            assert session.execute(text("SELECT 1")).scalar() == 1
        assert database_manager.settings.database_path.exists()

    def test_dispose_is_idempotent(self, database_manager: DatabaseManager) -> None:
        first = database_manager.get_engine()
        database_manager.dispose()
        database_manager.dispose()
        assert database_manager.get_engine() is not first
