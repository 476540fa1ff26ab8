"""TenantMetadata aggregate: a tenant plus its storage placement.

TenantMetadata is the persisted, versioned view of a tenant. It is always
derived from exactly one Tenant snapshot and a region. Every mutating
operation bumps ``version`` by one and refreshes ``last_updated_at``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from mobs.domain.tenancy.bucket_naming import generate_bucket_name
from mobs.domain.tenancy.tenant import Tenant
from mobs.foundation.domain.exceptions import InvalidInputError
from mobs.foundation.domain.tenant_value_objects import TenantStatus, require_transition
from mobs.foundation.domain.validation import (
    ValidationErrors,
    validate_bucket_name,
    validate_region,
    validate_timestamp,
    validate_version,
)


@dataclass
class TenantMetadata:
    """Versioned tenant aggregate with storage-specific properties.

    Build new instances with :meth:`from_tenant`. The constructor does not
    validate, so persisted documents can be rehydrated unchanged.

    Attributes:
        tenant_id: UUID string copied from the source Tenant.
        name: Display name copied from the source Tenant.
        created_at: Creation instant copied from the source Tenant.
        status: Current lifecycle state.
        bucket_name: Derived S3-safe bucket name.
        region: AWS-style region code (e.g. ``us-west-2``).
        last_updated_at: UTC instant of the latest mutation.
        version: Starts at 1, incremented on every mutation.
        provisioning_metadata: Free-form string key/value pairs recorded
            while provisioning storage.
    """

    tenant_id: str
    name: str
    created_at: datetime
    status: TenantStatus
    bucket_name: str
    region: str
    last_updated_at: datetime
    version: int = 1
    provisioning_metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_tenant(cls, tenant: Tenant | None, region: str) -> TenantMetadata:
        """Derive metadata for ``tenant`` placed in ``region``.

        Args:
            tenant: Source tenant snapshot.
            region: AWS-style region code.

        Returns:
            Validated TenantMetadata at version 1.

        Raises:
            InvalidInputError: If ``tenant`` is None.
            ValidationError: If any tenant or storage field is invalid.
        """
        if tenant is None:
            raise InvalidInputError("tenant cannot be None")

        metadata = cls(
            tenant_id=tenant.tenant_id,
            name=tenant.name,
            created_at=tenant.created_at,
            status=tenant.status,
            bucket_name=generate_bucket_name(tenant.tenant_id, tenant.name),
            region=region,
            last_updated_at=datetime.now(UTC),
            version=1,
            provisioning_metadata={},
        )
        metadata.validate()
        return metadata

    def to_tenant(self) -> Tenant:
        """Project back to the four core tenant fields."""
        return Tenant(
            tenant_id=self.tenant_id,
            name=self.name,
            created_at=self.created_at,
            status=self.status,
        )

    def validate(self) -> None:
        """Validate tenant fields plus bucket, region, timestamp and version.

        Raises:
            ValidationError: With one violation per failing field.
        """
        errors = ValidationErrors()
        self.to_tenant().collect_errors(errors)
        validate_bucket_name("bucket_name", self.bucket_name, errors)
        validate_region("region", self.region, errors)
        validate_timestamp("last_updated_at", self.last_updated_at, errors)
        validate_version("version", self.version, errors)
        errors.raise_if_errors()

    def change_status(self, new_status: TenantStatus | str) -> None:
        """Move to ``new_status``, bumping version and timestamp.

        Requesting the current status is a no-op and leaves version and
        ``last_updated_at`` untouched.

        Raises:
            InvalidStateTransitionError: If the transition is not allowed.
                No field is modified.
        """
        if require_transition(self.status, new_status):
            self.status = TenantStatus(new_status)
            self.increment_version()

    def increment_version(self) -> None:
        self.last_updated_at = datetime.now(UTC)
        self.version += 1

    def set_provisioning_metadata(self, key: str, value: str) -> None:
        """Insert or overwrite a provisioning entry and bump the version."""
        self.provisioning_metadata[key] = value
        self.increment_version()

    def get_provisioning_metadata(self, key: str) -> tuple[str, bool]:
        """Look up a provisioning entry.

        Returns:
            ``(value, True)`` if present, ``("", False)`` otherwise.
        """
        if key in self.provisioning_metadata:
            return self.provisioning_metadata[key], True
        return "", False

    def __str__(self) -> str:
        return (
            f"TenantMetadata{{ID: {self.tenant_id}, Name: {self.name}, "
            f"Bucket: {self.bucket_name}, Region: {self.region}, "
            f"Status: {self.status}, Version: {self.version}}}"
        )
