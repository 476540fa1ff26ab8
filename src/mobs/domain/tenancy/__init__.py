"""MOBS Domain Tenancy -- tenant lifecycle, versioned metadata and bucket naming."""

from mobs.domain.tenancy.bucket_naming import generate_bucket_name
from mobs.domain.tenancy.tenant import Tenant
from mobs.domain.tenancy.tenant_metadata import TenantMetadata
from mobs.domain.tenancy.tenant_service import TenantService

__all__ = [
    "Tenant",
    "TenantMetadata",
    "TenantService",
    "generate_bucket_name",
]
