"""MOBS Infra Persistence -- tenant store adapters and SQLite session management."""

from mobs.infra.persistence.database import (
    DatabaseManager,
    StorageSettings,
    get_database_manager,
    get_storage_settings,
)
from mobs.infra.persistence.documents import TenantDocument
from mobs.infra.persistence.memory_store import InMemoryTenantStore
from mobs.infra.persistence.tenant_store import SqlTenantStore

__all__ = [
    "DatabaseManager",
    "InMemoryTenantStore",
    "SqlTenantStore",
    "StorageSettings",
    "TenantDocument",
    "get_database_manager",
    "get_storage_settings",
]
