"""Field validators and the validation error accumulator.

Each validator checks a single field, appends at most one violation to the
accumulator and never raises. Rules within a validator short-circuit on the
first failure; violations accumulate across fields so callers can report
every broken field at once.

Usage:
    errors = ValidationErrors()
    validate_tenant_name("name", name, errors)
    validate_region("region", region, errors)
    errors.raise_if_errors()
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mobs.foundation.domain.exceptions import FieldViolation, ValidationError
from mobs.foundation.domain.tenant_value_objects import TenantStatus

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    "ValidationErrors",
    "validate_bucket_name",
    "validate_region",
    "validate_tenant_name",
    "validate_tenant_status",
    "validate_timestamp",
    "validate_uuid",
    "validate_version",
]

# Canonical textual UUID; hyphens only at the standard positions
_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Tenant name: 3-64 chars, alphanumeric with hyphens and underscores
_TENANT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{2,63}$")

# S3 bucket name: 3-63 chars, must start and end with lowercase alphanumeric
_BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")

_REGION_PATTERN = re.compile(r"^[a-z]{2}-[a-z]+-[0-9]$")

_STATUS_CHOICES = "[" + " ".join(s.value for s in TenantStatus) + "]"


class ValidationErrors:
    """Mutable accumulator of field violations.

    Passed by reference to each validator. Once all fields have been
    checked, ``raise_if_errors()`` turns the collection into a single
    :class:`ValidationError`.
    """

    def __init__(self) -> None:
        self._violations: list[FieldViolation] = []

    def add(self, field: str, message: str) -> None:
        """Record a violation for ``field``."""
        self._violations.append(FieldViolation(field, message))

    @property
    def has_errors(self) -> bool:
        return bool(self._violations)

    def raise_if_errors(self) -> None:
        """Raise a ValidationError carrying every recorded violation.

        Raises:
            ValidationError: If at least one violation was recorded.
        """
        if self._violations:
            raise ValidationError(self._violations)

    def __iter__(self) -> Iterator[FieldViolation]:
        return iter(self._violations)

    def __len__(self) -> int:
        return len(self._violations)

    def __str__(self) -> str:
        if not self._violations:
            return ""
        return "validation failed: " + "; ".join(str(v) for v in self._violations)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._violations!r})"


def validate_uuid(field: str, value: str, errors: ValidationErrors) -> None:
    """Check that ``value`` is a non-empty UUID in 8-4-4-4-12 hex layout."""
    if not value:
        errors.add(field, "cannot be empty")
        return
    if not isinstance(value, str) or not _UUID_PATTERN.fullmatch(value):
        errors.add(field, "must be a valid UUID")


def validate_tenant_name(field: str, value: str, errors: ValidationErrors) -> None:
    """Check tenant name emptiness, length (3-64) and character set."""
    if not value:
        errors.add(field, "cannot be empty")
        return
    if len(value) < 3 or len(value) > 64:
        errors.add(field, "must be between 3 and 64 characters")
        return
    if not _TENANT_NAME_PATTERN.fullmatch(value):
        errors.add(field, "must contain only alphanumeric characters, hyphens, and underscores")


def validate_timestamp(field: str, value: datetime | None, errors: ValidationErrors) -> None:
    """Check that a timestamp is set and not in the future.

    Naive datetimes are interpreted as UTC.
    """
    if value is None:
        errors.add(field, "cannot be empty")
        return
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    if value > datetime.now(UTC):
        errors.add(field, "cannot be in the future")


def validate_tenant_status(field: str, value: str, errors: ValidationErrors) -> None:
    """Check that ``value`` is one of the recognized TenantStatus values."""
    if value not in TenantStatus.__members__.values():
        errors.add(field, f"must be one of {_STATUS_CHOICES}")


def validate_bucket_name(field: str, value: str, errors: ValidationErrors) -> None:
    """Check a bucket name against S3 naming rules.

    Rules are applied in a fixed order and only the first failure is
    reported.
    """
    if not value:
        errors.add(field, "cannot be empty")
        return
    if len(value) < 3 or len(value) > 63:
        errors.add(field, "must be between 3 and 63 characters")
        return
    if value.startswith("xn--"):
        errors.add(field, "cannot start with 'xn--'")
        return
    if ".." in value:
        errors.add(field, "cannot contain consecutive periods")
        return
    if ".-" in value or "-." in value:
        errors.add(field, "cannot contain adjacent periods and hyphens")
        return
    if not _BUCKET_NAME_PATTERN.fullmatch(value):
        errors.add(
            field,
            "must contain only lowercase alphanumeric characters, periods, and hyphens",
        )


def validate_region(field: str, value: str, errors: ValidationErrors) -> None:
    """Check that ``value`` looks like an AWS region code (e.g. ``us-west-2``)."""
    if not value:
        errors.add(field, "cannot be empty")
        return
    if not _REGION_PATTERN.fullmatch(value):
        errors.add(field, "must be a valid AWS region code")


def validate_version(field: str, value: int, errors: ValidationErrors) -> None:
    if value < 0:
        errors.add(field, "must be non-negative")
