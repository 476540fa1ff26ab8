"""In-memory tenant store.

Dict-backed TenantStorePort adapter for tests and ephemeral runs. Stores
defensive copies so callers cannot mutate persisted state in place.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from mobs.domain.tenancy.tenant_metadata import TenantMetadata
from mobs.foundation.domain.exceptions import ConflictError, NotFoundError

if TYPE_CHECKING:
    from mobs.domain.tenancy.tenant import Tenant


class InMemoryTenantStore:
    """TenantStorePort backed by a plain dict keyed by tenant ID.

    Args:
        region: Region assigned to tenants created through this store.
    """

    def __init__(self, region: str) -> None:
        self._region = region
        self._tenants: dict[str, TenantMetadata] = {}

    def create(self, tenant: Tenant) -> TenantMetadata:
        metadata = TenantMetadata.from_tenant(tenant, self._region)
        if metadata.tenant_id in self._tenants:
            raise ConflictError(
                f"Tenant '{metadata.tenant_id}' already exists",
                tenant_id=metadata.tenant_id,
            )
        self._tenants[metadata.tenant_id] = copy.deepcopy(metadata)
        return metadata

    def get(self, tenant_id: str) -> TenantMetadata:
        try:
            return copy.deepcopy(self._tenants[tenant_id])
        except KeyError:
            raise NotFoundError("Tenant", tenant_id) from None

    def list(self) -> list[TenantMetadata]:
        return [
            copy.deepcopy(m)
            for m in sorted(self._tenants.values(), key=lambda m: (m.created_at, m.tenant_id))
        ]

    def delete(self, tenant_id: str) -> None:
        if self._tenants.pop(tenant_id, None) is None:
            raise NotFoundError("Tenant", tenant_id)
