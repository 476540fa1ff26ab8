"""MOBS Foundation Domain -- pure Python domain primitives.

Exceptions, tenant lifecycle value objects, field validators and the
persistence port shared by every other layer.
"""

from mobs.foundation.domain.exceptions import (
    ConflictError,
    DomainError,
    FieldViolation,
    InvalidInputError,
    InvalidStateError,
    InvalidStateTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from mobs.foundation.domain.ports import TenantStorePort
from mobs.foundation.domain.tenant_value_objects import (
    ALLOWED_TRANSITIONS,
    TenantStatus,
    is_valid_transition,
    require_transition,
)
from mobs.foundation.domain.validation import ValidationErrors

__all__ = [
    "ALLOWED_TRANSITIONS",
    "ConflictError",
    "DomainError",
    "FieldViolation",
    "InvalidInputError",
    "InvalidStateError",
    "InvalidStateTransitionError",
    "NotFoundError",
    "StorageError",
    "TenantStatus",
    "TenantStorePort",
    "ValidationError",
    "ValidationErrors",
    "is_valid_transition",
    "require_transition",
]
