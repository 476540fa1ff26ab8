"""Embedded SQLite database settings and session management.

The control plane keeps tenant documents in a single SQLite file under a
local data directory. Engines and session factories are created lazily.

Usage:
    from mobs.infra.persistence.database import get_database_manager

    manager = get_database_manager()
    manager.ensure_data_dir()
    session_factory = manager.get_session_factory()
    with session_factory() as session:
        ...
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from mobs.foundation.domain.validation import ValidationErrors, validate_region


class StorageSettings(BaseSettings):
    """Storage configuration from environment variables.

    Loads configuration from environment variables with ``MOBS_`` prefix:
    - MOBS_DATA_DIR: Directory holding the database file (default: ./data)
    - MOBS_DATABASE_FILE: SQLite file name (default: mobs.db)
    - MOBS_REGION: Region assigned to newly created tenants (default: us-east-1)
    - MOBS_ECHO: Echo SQL statements to the log (default: false)

    Example:
        >>> settings = StorageSettings(data_dir="/tmp/mobs")
        >>> settings.database_url
        'sqlite:////tmp/mobs/mobs.db'
    """

    model_config = SettingsConfigDict(
        env_prefix="MOBS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("./data"), description="Directory for the database file")
    database_file: str = Field(default="mobs.db", min_length=1, description="SQLite file name")
    region: str = Field(default="us-east-1", description="Region for new tenants")
    echo: bool = Field(default=False, description="Echo SQL statements to log")

    @field_validator("region")
    @classmethod
    def validate_region_code(cls, v: str) -> str:
        """Reject region codes that the domain would refuse at create time."""
        errors = ValidationErrors()
        validate_region("region", v, errors)
        if errors.has_errors:
            raise ValueError(str(errors))
        return v

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.database_file

    @property
    def database_url(self) -> str:
        """Build the SQLAlchemy connection URL for the SQLite file."""
        return f"sqlite:///{self.database_path.as_posix()}"


class DatabaseManager:
    """Encapsulates the SQLite engine and session factory lifecycle.

    Multiple instances can coexist with different settings (e.g. one per
    temporary directory in tests).

    Usage:
        manager = DatabaseManager(StorageSettings())
        engine = manager.get_engine()
        manager.dispose()
    """

    def __init__(self, settings: StorageSettings) -> None:
        self._settings = settings
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def settings(self) -> StorageSettings:
        """The settings used by this manager."""
        return self._settings

    def ensure_data_dir(self) -> Path:
        """Create the data directory (and parents) if missing.

        Returns:
            The data directory path.
        """
        data_dir = self._settings.data_dir
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(
                self._settings.database_url,
                echo=self._settings.echo,
            )
        return self._engine

    def get_session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                self.get_engine(),
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    def dispose(self) -> None:
        """Dispose of the engine and its connection pool.

        Safe to call multiple times.
        """
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Get cached StorageSettings instance.

    Clear cache with ``get_storage_settings.cache_clear()`` for testing.
    """
    return StorageSettings()


@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """Get the default DatabaseManager singleton."""
    return DatabaseManager(get_storage_settings())
