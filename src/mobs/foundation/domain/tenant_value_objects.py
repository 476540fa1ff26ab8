"""Value objects for the tenant lifecycle.

Holds the status enumeration and the fixed transition table that governs
which status changes a tenant may go through.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from mobs.foundation.domain.exceptions import InvalidStateTransitionError


class TenantStatus(StrEnum):
    """Tenant lifecycle states.

    PROVISIONING is the only initial state and there is no terminal state::

        PROVISIONING -> ACTIVE <-> SUSPENDED
        PROVISIONING -> SUSPENDED

    Uses StrEnum for native JSON serialization.
    """

    PROVISIONING = "PROVISIONING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


ALLOWED_TRANSITIONS: MappingProxyType[TenantStatus, frozenset[TenantStatus]] = MappingProxyType(
    {
        TenantStatus.PROVISIONING: frozenset({TenantStatus.ACTIVE, TenantStatus.SUSPENDED}),
        TenantStatus.ACTIVE: frozenset({TenantStatus.SUSPENDED}),
        TenantStatus.SUSPENDED: frozenset({TenantStatus.ACTIVE}),
    }
)


def is_valid_transition(from_status: str, to_status: str) -> bool:
    """Check whether ``from_status -> to_status`` is in the transition table.

    Self-pairs are rejected here; callers that treat a same-status request
    as a no-op must check for it first.

    Args:
        from_status: Current status (enum member or its string value).
        to_status: Requested status (enum member or its string value).

    Returns:
        True if the transition is allowed, False otherwise (including for
        unrecognized statuses).
    """
    allowed = ALLOWED_TRANSITIONS.get(from_status, frozenset())  # type: ignore[call-overload]
    return to_status in allowed


def require_transition(current: str, target: str) -> bool:
    """Guard a requested status change.

    Args:
        current: Status the entity is in now.
        target: Status the caller wants to move to.

    Returns:
        False when ``target`` equals ``current`` (nothing to do), True when
        the transition is allowed and should be applied.

    Raises:
        InvalidStateTransitionError: If the transition is not allowed.
    """
    if current == target:
        return False
    if not is_valid_transition(current, target):
        raise InvalidStateTransitionError(
            f"Cannot transition from {current} to {target}",
            current_state=str(current),
            target_state=str(target),
        )
    return True
