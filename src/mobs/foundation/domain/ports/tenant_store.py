"""Port interface for tenant persistence.

This module defines the TenantStorePort protocol. The domain and the
tenant service depend only on this contract; adapters (SQLite, in-memory)
live in ``mobs.infra.persistence``.

Example:
    >>> from mobs.foundation.domain.ports import TenantStorePort
    >>> def count_tenants(store: TenantStorePort) -> int:
    ...     return len(store.list())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mobs.domain.tenancy.tenant import Tenant
    from mobs.domain.tenancy.tenant_metadata import TenantMetadata


@runtime_checkable
class TenantStorePort(Protocol):
    """Port for tenant CRUD operations.

    Implementations decide where tenant metadata lives. They derive the
    persisted TenantMetadata from the Tenant handed to ``create``.
    """

    def create(self, tenant: Tenant) -> TenantMetadata:
        """Store a new tenant.

        Args:
            tenant: Freshly created, validated tenant.

        Returns:
            The persisted TenantMetadata derived from ``tenant``.

        Raises:
            ConflictError: If a tenant with the same ID already exists.
            ValidationError: If the derived metadata fails validation.
        """
        ...

    def get(self, tenant_id: str) -> TenantMetadata:
        """Fetch tenant metadata by ID.

        Raises:
            NotFoundError: If no tenant has this ID.
        """
        ...

    def list(self) -> list[TenantMetadata]:
        """Return every stored tenant, oldest first."""
        ...

    def delete(self, tenant_id: str) -> None:
        """Remove a tenant by ID.

        Raises:
            NotFoundError: If no tenant has this ID.
        """
        ...
