"""Persisted document shape for tenant metadata.

Stores keep TenantMetadata as a JSON document. The pydantic model pins the
field names and parses timestamps back into aware datetimes.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mobs.domain.tenancy.tenant_metadata import TenantMetadata
from mobs.foundation.domain.tenant_value_objects import TenantStatus


class TenantDocument(BaseModel):
    """JSON document for a stored tenant."""

    model_config = ConfigDict(frozen=True)

    tenant_id: str
    name: str
    created_at: datetime
    status: TenantStatus
    bucket_name: str
    region: str
    last_updated_at: datetime
    version: int = Field(ge=0)
    provisioning_metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("created_at", "last_updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC and normalize aware ones to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    @classmethod
    def from_metadata(cls, metadata: TenantMetadata) -> TenantDocument:
        return cls(
            tenant_id=metadata.tenant_id,
            name=metadata.name,
            created_at=metadata.created_at,
            status=metadata.status,
            bucket_name=metadata.bucket_name,
            region=metadata.region,
            last_updated_at=metadata.last_updated_at,
            version=metadata.version,
            provisioning_metadata=dict(metadata.provisioning_metadata),
        )

    def to_metadata(self) -> TenantMetadata:
        """Rehydrate the aggregate without re-running creation-time validation."""
        return TenantMetadata(
            tenant_id=self.tenant_id,
            name=self.name,
            created_at=self.created_at,
            status=self.status,
            bucket_name=self.bucket_name,
            region=self.region,
            last_updated_at=self.last_updated_at,
            version=self.version,
            provisioning_metadata=dict(self.provisioning_metadata),
        )
