"""SQLite-backed tenant store (embedded document store).

Each tenant is one row holding its JSON document, keyed by tenant ID.
Satisfies TenantStorePort.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from pydantic import ValidationError as DocumentError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from mobs.domain.tenancy.tenant_metadata import TenantMetadata
from mobs.foundation.domain.exceptions import ConflictError, NotFoundError, StorageError
from mobs.infra.persistence.documents import TenantDocument

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy import Engine
    from sqlalchemy.orm import Session

    from mobs.domain.tenancy.tenant import Tenant

logger = logging.getLogger(__name__)

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS tenants (
    tenant_id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    document TEXT NOT NULL
)
"""

_INSERT_SQL = (
    "INSERT INTO tenants (tenant_id, created_at, document) "
    "VALUES (:tenant_id, :created_at, :document)"
)

_SELECT_ONE_SQL = "SELECT document FROM tenants WHERE tenant_id = :tenant_id"

_SELECT_ALL_SQL = "SELECT tenant_id, document FROM tenants ORDER BY created_at ASC, tenant_id ASC"

_DELETE_SQL = "DELETE FROM tenants WHERE tenant_id = :tenant_id"


class SqlTenantStore:
    """Tenant persistence on a SQLAlchemy session factory.

    Args:
        session_factory: Callable returning a SQLAlchemy Session context manager.
        region: Region assigned to tenants created through this store.
    """

    def __init__(self, session_factory: Callable[[], Session], region: str) -> None:
        self._session_factory = session_factory
        self._region = region

    @classmethod
    def ensure_table_exists(cls, engine: Engine) -> None:
        """Create the tenants table if it does not exist.

        Uses CREATE TABLE IF NOT EXISTS for idempotency.
        """
        with engine.begin() as conn:
            conn.execute(text(_CREATE_TABLE_SQL))
        logger.debug("tenants_table_ensured")
    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """Open a session, converting driver errors into StorageError."""
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as err:
            detail = getattr(err, "orig", None) or err
            logger.debug(
                "tenant_store_error",
                extra={"operation": operation, "error_type": type(err).__name__},
            )
            raise StorageError(f"Database error during {operation}: {detail}") from err

    @staticmethod
    def _decode(tenant_id: str, raw: str) -> TenantMetadata:
        try:
            return TenantDocument.model_validate_json(raw).to_metadata()
        except DocumentError as err:
            raise StorageError(
                f"Stored tenant document is corrupt: {err.error_count()} invalid field(s)",
                tenant_id=tenant_id,
            ) from err

    def create(self, tenant: Tenant) -> TenantMetadata:
        """Derive metadata for ``tenant`` and insert it.

        Raises:
            ValidationError: If the derived metadata is invalid.
            ConflictError: If the tenant ID is already stored.
            StorageError: If the database cannot be written.
        """
        metadata = TenantMetadata.from_tenant(tenant, self._region)
        document = TenantDocument.from_metadata(metadata)
        with self._session("create") as session:
            try:
                session.execute(
                    text(_INSERT_SQL),
                    {
                        "tenant_id": document.tenant_id,
                        "created_at": document.created_at.isoformat(),
                        "document": document.model_dump_json(),
                    },
                )
                session.commit()
            except IntegrityError as err:
                session.rollback()
                raise ConflictError(
                    f"Tenant '{tenant.tenant_id}' already exists",
                    tenant_id=tenant.tenant_id,
                ) from err
        return metadata

    def get(self, tenant_id: str) -> TenantMetadata:
        """Read a single tenant by ID.

        Raises:
            NotFoundError: If no row matches.
            StorageError: If the database fails or the stored document is corrupt.
        """
        with self._session("get") as session:
            row = session.execute(text(_SELECT_ONE_SQL), {"tenant_id": tenant_id}).fetchone()
        if row is None:
            raise NotFoundError("Tenant", tenant_id)
        return self._decode(tenant_id, row[0])

    def list(self) -> list[TenantMetadata]:
        """List all tenants ordered by creation time.

        Raises:
            StorageError: If the database fails or any stored document is corrupt.
        """
        with self._session("list") as session:
            rows = session.execute(text(_SELECT_ALL_SQL)).fetchall()
        return [self._decode(row[0], row[1]) for row in rows]

    def delete(self, tenant_id: str) -> None:
        """Delete a tenant by ID.

        Raises:
            NotFoundError: If no row matches.
            StorageError: If the database cannot be written.
        """
        with self._session("delete") as session:
            result = session.execute(text(_DELETE_SQL), {"tenant_id": tenant_id})
            session.commit()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError("Tenant", tenant_id)
