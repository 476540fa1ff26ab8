"""Deterministic storage bucket naming for tenants.

Format: ``apt-{first 8 chars of tenant id}-{sanitized name}``.
"""

from __future__ import annotations

BUCKET_PREFIX = "apt-"
MAX_BUCKET_NAME_LENGTH = 63

# "apt-" + 8-char id fragment + "-"
_ID_FRAGMENT_LENGTH = 8
_FIXED_OVERHEAD = len(BUCKET_PREFIX) + _ID_FRAGMENT_LENGTH + 1

_NAME_SEPARATORS = str.maketrans({" ": "-", "_": "-", ".": "-"})


def generate_bucket_name(tenant_id: str, name: str) -> str:
    """Derive an S3-style bucket name from tenant identity.

    The name is lowercased, spaces/underscores/periods become hyphens, and
    the result is cut to fit the 63-character bucket limit. This function
    never fails; the result is not validated here and can still break S3
    rules for unusual input, which the bucket name validator catches.

    Args:
        tenant_id: Tenant UUID string. An ID shorter than 8 characters
            yields an empty fragment.
        name: Tenant display name.

    Returns:
        The derived bucket name.

    Example:
        >>> generate_bucket_name("550e8400-e29b-41d4-a716-446655440000", "Acme Corp")
        'apt-550e8400-acme-corp'
    """
    id_fragment = tenant_id[:_ID_FRAGMENT_LENGTH] if len(tenant_id) >= _ID_FRAGMENT_LENGTH else ""

    sanitized = name.lower().translate(_NAME_SEPARATORS)

    max_name_length = MAX_BUCKET_NAME_LENGTH - _FIXED_OVERHEAD
    if len(sanitized) > max_name_length:
        sanitized = sanitized[:max_name_length]
    sanitized = sanitized.rstrip("-")

    return f"{BUCKET_PREFIX}{id_fragment}-{sanitized}"
