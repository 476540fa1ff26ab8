"""Application service for tenant lifecycle operations.

Thin coordinator between callers (the CLI) and the tenant store port.
Entity rules live in Tenant / TenantMetadata; this layer only guards
its own inputs and delegates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mobs.domain.tenancy.tenant import Tenant
from mobs.foundation.domain.exceptions import InvalidInputError

if TYPE_CHECKING:
    from mobs.domain.tenancy.tenant_metadata import TenantMetadata
    from mobs.foundation.domain.ports.tenant_store import TenantStorePort

logger = logging.getLogger(__name__)


class TenantService:
    """Creates, reads, lists and deletes tenants through a TenantStorePort.

    Args:
        store: Persistence adapter satisfying TenantStorePort.
    """

    def __init__(self, store: TenantStorePort) -> None:
        self._store = store

    def create_tenant(self, name: str) -> TenantMetadata:
        """Create a tenant named ``name`` and persist it.

        Raises:
            InvalidInputError: If ``name`` is empty.
            ValidationError: If ``name`` breaks the tenant naming rules.
            ConflictError: If the store already holds the generated ID.
        """
        if not name:
            raise InvalidInputError("tenant name cannot be empty")
        tenant = Tenant.create(name)
        metadata = self._store.create(tenant)
        logger.info(
            "tenant_created",
            extra={
                "tenant_id": metadata.tenant_id,
                "bucket_name": metadata.bucket_name,
                "region": metadata.region,
            },
        )
        return metadata

    def get_tenant(self, tenant_id: str) -> TenantMetadata:
        """Fetch a tenant by ID.

        Raises:
            InvalidInputError: If ``tenant_id`` is empty.
            NotFoundError: If the tenant does not exist.
        """
        self._require_id(tenant_id)
        return self._store.get(tenant_id)

    def list_tenants(self) -> list[TenantMetadata]:
        return self._store.list()

    def delete_tenant(self, tenant_id: str) -> None:
        """Delete a tenant by ID.

        Raises:
            InvalidInputError: If ``tenant_id`` is empty.
            NotFoundError: If the tenant does not exist.
        """
        self._require_id(tenant_id)
        self._store.delete(tenant_id)
        logger.info("tenant_deleted", extra={"tenant_id": tenant_id})

    @staticmethod
    def _require_id(tenant_id: str) -> None:
        if not tenant_id:
            raise InvalidInputError("tenant ID cannot be empty")
