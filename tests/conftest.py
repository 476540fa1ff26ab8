"""Shared fixtures for MOBS tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog

from mobs.domain.tenancy.tenant import Tenant
from mobs.domain.tenancy.tenant_metadata import TenantMetadata
from mobs.foundation.domain.tenant_value_objects import TenantStatus
from mobs.infra.observability.logging import get_logging_settings
from mobs.infra.persistence.database import DatabaseManager, StorageSettings
from mobs.infra.persistence.memory_store import InMemoryTenantStore
from mobs.infra.persistence.tenant_store import SqlTenantStore

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture()
def new_tenant() -> Tenant:
    """Create a Tenant in PROVISIONING state."""
    return Tenant.create("test-tenant")


@pytest.fixture()
def metadata(new_tenant: Tenant) -> TenantMetadata:
    """TenantMetadata derived from a PROVISIONING tenant in us-west-2."""
    return TenantMetadata.from_tenant(new_tenant, "us-west-2")


@pytest.fixture()
def active_metadata(metadata: TenantMetadata) -> TenantMetadata:
    """TenantMetadata in ACTIVE state (version 2)."""
    metadata.change_status(TenantStatus.ACTIVE)
    return metadata


@pytest.fixture()
def memory_store() -> InMemoryTenantStore:
    return InMemoryTenantStore(region="us-west-2")


@pytest.fixture()
def storage_settings(tmp_path: Path) -> StorageSettings:
    """StorageSettings pointing at a per-test temporary directory."""
    return StorageSettings(data_dir=tmp_path / "data", region="eu-central-1")


@pytest.fixture()
def database_manager(storage_settings: StorageSettings) -> Iterator[DatabaseManager]:
    manager = DatabaseManager(storage_settings)
    manager.ensure_data_dir()
    yield manager
    manager.dispose()


@pytest.fixture()
def sql_store(database_manager: DatabaseManager) -> SqlTenantStore:
    """SqlTenantStore on a fresh SQLite file with the tenants table created."""
    SqlTenantStore.ensure_table_exists(database_manager.get_engine())
    return SqlTenantStore(
        database_manager.get_session_factory(),
        region=database_manager.settings.region,
    )


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo configure_logging() so handlers bound to captured streams do not leak."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
    get_logging_settings.cache_clear()
