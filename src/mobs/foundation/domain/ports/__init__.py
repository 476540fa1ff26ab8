"""Domain port interfaces for hexagonal architecture.

Ports define abstract interfaces that the domain layer uses to interact
with external services. Implementations (adapters) live in infrastructure.
"""

from mobs.foundation.domain.ports.tenant_store import TenantStorePort

__all__ = ["TenantStorePort"]
