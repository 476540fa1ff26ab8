"""Domain exception hierarchy for type-safe error handling.

Every non-validation failure raised by the domain carries a machine-readable
``error_code`` and structured ``context``. Field validation failures are
collected first and surfaced together as a single :class:`ValidationError`.

Example:
    >>> from mobs.foundation.domain.exceptions import NotFoundError
    >>> raise NotFoundError("Tenant", "550e8400-e29b-41d4-a716-446655440000")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

__all__ = [
    "ConflictError",
    "DomainError",
    "FieldViolation",
    "InvalidInputError",
    "InvalidStateError",
    "InvalidStateTransitionError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (tenant IDs, states).
        cause: Underlying exception, if the error wraps one.

    Example:
        >>> raise DomainError("Operation failed", context={"tenant_id": "123"})
        DomainError: Operation failed (tenant_id=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
            cause: Optional underlying exception. Also set as ``__cause__``.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """Underlying exception, from ``cause=`` or ``raise ... from``."""
        return self.__cause__

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class InvalidInputError(DomainError):
    """Raised when an operation receives a missing or malformed argument.

    Example:
        >>> raise InvalidInputError("tenant cannot be None")
    """

    error_code: str = "INVALID_INPUT"


class InvalidStateError(DomainError):
    """Raised when an entity is not in a state that permits the operation."""

    error_code: str = "INVALID_STATE"


class InvalidStateTransitionError(DomainError):
    """Raised when a status transition is not in the transition table.

    The entity the transition was attempted on is left unchanged.

    Example:
        >>> raise InvalidStateTransitionError(
        ...     "Cannot transition from ACTIVE to PROVISIONING",
        ...     current_state="ACTIVE",
        ...     target_state="PROVISIONING",
        ... )
    """

    error_code: str = "INVALID_TRANSITION"

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize invalid state transition error.

        Args:
            message: Description of the rejected transition.
            **context: Debugging context (``current_state``, ``target_state``).
        """
        super().__init__(message, context)


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist.

    Attributes:
        error_code: "RESOURCE_NOT_FOUND" (class constant).
        resource_type: Type of missing resource.
        resource_id: Identifier of missing resource.

    Example:
        >>> raise NotFoundError("Tenant", "abc")
        NotFoundError: Tenant not found: abc
    """

    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        resource_id: UUID | str,
        **extra_context: Any,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} not found: {resource_id}"
        super().__init__(message)
        self.context = dict(extra_context)


class ConflictError(DomainError):
    """Raised when a write conflicts with what the store already holds.

    Used for duplicate tenant identifiers and optimistic-concurrency
    violations.

    Example:
        >>> raise ConflictError("Tenant already exists", tenant_id="abc")
        ConflictError: Conflict: Tenant already exists (tenant_id=abc)
    """

    error_code: str = "CONCURRENCY_CONFLICT"

    def __init__(self, reason: str, **context: Any) -> None:
        self.reason = reason
        super().__init__(f"Conflict: {reason}", context)


class StorageError(DomainError):
    """Raised when the storage backend fails or holds unreadable data.

    Adapters wrap driver and decoding errors in this type so callers only
    ever handle DomainError. The original exception is kept as ``cause``.

    Example:
        >>> raise StorageError("Failed to read tenant", tenant_id="abc")
        StorageError: Failed to read tenant (tenant_id=abc)
    """

    error_code: str = "STORAGE_ERROR"

    def __init__(
        self, message: str, *, cause: BaseException | None = None, **context: Any
    ) -> None:
        super().__init__(message, context, cause=cause)


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single field-level validation failure.

    Attributes:
        field: Name of the offending field (e.g. ``"region"``).
        message: Human-readable rule description (e.g. ``"cannot be empty"``).
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(DomainError):
    """Raised when one or more fields fail validation.

    The message joins every violation as ``"field: message"`` with ``"; "``
    and prefixes the result with ``"validation failed: "``.

    Attributes:
        errors: The collected violations, in the order they were found.

    Example:
        >>> raise ValidationError([FieldViolation("name", "cannot be empty")])
        ValidationError: validation failed: name: cannot be empty
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(self, violations: Iterable[FieldViolation]) -> None:
        self.errors: tuple[FieldViolation, ...] = tuple(violations)
        message = "validation failed: " + "; ".join(str(v) for v in self.errors)
        super().__init__(message)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed, in order."""
        return [v.field for v in self.errors]
