"""Tenant entity with lifecycle state machine.

A Tenant is the transient, creation-time view of a customer account. The
long-lived, persisted aggregate is TenantMetadata, which is derived from a
Tenant snapshot and can be projected back into one.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from mobs.foundation.domain.tenant_value_objects import TenantStatus, require_transition
from mobs.foundation.domain.validation import (
    ValidationErrors,
    validate_tenant_name,
    validate_tenant_status,
    validate_timestamp,
    validate_uuid,
)


@dataclass
class Tenant:
    """Customer record in the multi-tenant object storage system.

    State machine::

        PROVISIONING -----> ACTIVE
              |             ^  |
              |             |  v
              +--------> SUSPENDED

    Use :meth:`create` to build a new tenant; the constructor itself does
    not validate so that stored snapshots can be rehydrated as-is.

    Attributes:
        tenant_id: UUID string identifying the tenant.
        name: Human-chosen label (3-64 chars, alphanumeric, ``-`` and ``_``).
        created_at: UTC creation instant.
        status: Current lifecycle state.
    """

    tenant_id: str
    name: str
    created_at: datetime
    status: TenantStatus = TenantStatus.PROVISIONING

    @classmethod
    def create(cls, name: str) -> Tenant:
        """Create a new tenant in PROVISIONING state.

        Args:
            name: Tenant display name.

        Returns:
            A validated Tenant with a fresh UUID.

        Raises:
            ValidationError: If the name (or any generated field) is invalid.
        """
        tenant = cls(
            tenant_id=str(uuid.uuid4()),
            name=name,
            created_at=datetime.now(UTC),
            status=TenantStatus.PROVISIONING,
        )
        tenant.validate()
        return tenant

    def validate(self) -> None:
        """Run every tenant field validator.

        Raises:
            ValidationError: With one violation per failing field.
        """
        errors = ValidationErrors()
        self.collect_errors(errors)
        errors.raise_if_errors()

    def collect_errors(self, errors: ValidationErrors) -> None:
        """Append violations for the four tenant fields to ``errors``."""
        validate_uuid("tenant_id", self.tenant_id, errors)
        validate_tenant_name("name", self.name, errors)
        validate_timestamp("created_at", self.created_at, errors)
        validate_tenant_status("status", self.status, errors)

    def change_status(self, new_status: TenantStatus | str) -> None:
        """Move the tenant to ``new_status``.

        Requesting the current status is a no-op.

        Raises:
            InvalidStateTransitionError: If the transition is not allowed.
                The tenant is left unchanged.
        """
        if require_transition(self.status, new_status):
            self.status = TenantStatus(new_status)

    def __str__(self) -> str:
        return f"Tenant{{ID: {self.tenant_id}, Name: {self.name}, Status: {self.status}}}"
