"""Tests for field validators and the ValidationErrors accumulator."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from mobs.foundation.domain.exceptions import FieldViolation, ValidationError
from mobs.foundation.domain.validation import (
    ValidationErrors,
    validate_bucket_name,
    validate_region,
    validate_tenant_name,
    validate_tenant_status,
    validate_timestamp,
    validate_uuid,
    validate_version,
)


_BUCKET_CHARSET = "must contain only lowercase alphanumeric characters, periods, and hyphens"


def _messages(errors: ValidationErrors) -> list[str]:
    return [v.message for v in errors]


@pytest.mark.unit
class TestValidationErrors:
    def test_starts_empty(self) -> None:
        errors = ValidationErrors()
        assert not errors.has_errors
        assert len(errors) == 0
        assert str(errors) == ""

    def test_raise_if_errors_noop_when_empty(self) -> None:
        ValidationErrors().raise_if_errors()

    def test_aggregates_three_fields(self) -> None:
        errors = ValidationErrors()
        errors.add("tenant_id", "must be a valid UUID")
        errors.add("name", "cannot be empty")
        errors.add("region", "must be a valid AWS region code")

        message = str(errors)
        assert message.startswith("validation failed: ")
        assert "tenant_id: must be a valid UUID" in message
        assert "name: cannot be empty" in message
        assert "region: must be a valid AWS region code" in message
        assert message.count("; ") == 2

    def test_raise_if_errors_carries_violations(self) -> None:
        errors = ValidationErrors()
        errors.add("name", "cannot be empty")
        errors.add("version", "must be non-negative")
        with pytest.raises(ValidationError) as exc_info:
            errors.raise_if_errors()
        assert exc_info.value.errors == (
            FieldViolation("name", "cannot be empty"),
            FieldViolation("version", "must be non-negative"),
        )
        assert str(exc_info.value) == str(errors)


@pytest.mark.unit
class TestValidateUuid:
    def test_valid(self) -> None:
        errors = ValidationErrors()
        validate_uuid("tenant_id", "550e8400-e29b-41d4-a716-446655440000", errors)
        assert not errors.has_errors

    def test_empty(self) -> None:
        errors = ValidationErrors()
        validate_uuid("tenant_id", "", errors)
        assert _messages(errors) == ["cannot be empty"]

    def test_uppercase_accepted(self) -> None:
        errors = ValidationErrors()
        validate_uuid("tenant_id", "550E8400-E29B-41D4-A716-446655440000", errors)
        assert not errors.has_errors

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "550e-8400e29b41d4a716-446655440000",
            "550e8400e29b41d4a716446655440000",
            "{550e8400-e29b-41d4-a716-446655440000}",
            "urn:uuid:550e8400-e29b-41d4-a716-446655440000",
            "550e8400-e29b-41d4-a716-44665544000g",
            "550e8400-e29b-41d4-a716-446655440000\n",
        ],
    )
    def test_malformed(self, value: str) -> None:
        errors = ValidationErrors()
        validate_uuid("tenant_id", value, errors)
        assert _messages(errors) == ["must be a valid UUID"]


@pytest.mark.unit
class TestValidateTenantName:
    @pytest.mark.parametrize("name", ["abc", "Acme_Corp-1", "9lives", "a" * 64])
    def test_valid(self, name: str) -> None:
        errors = ValidationErrors()
        validate_tenant_name("name", name, errors)
        assert not errors.has_errors

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "cannot be empty"),
            ("ab", "must be between 3 and 64 characters"),
            ("a" * 65, "must be between 3 and 64 characters"),
            ("-abc", "must contain only alphanumeric characters, hyphens, and underscores"),
            ("acme corp", "must contain only alphanumeric characters, hyphens, and underscores"),
            ("acme.corp", "must contain only alphanumeric characters, hyphens, and underscores"),
            ("acme\n", "must contain only alphanumeric characters, hyphens, and underscores"),
        ],
    )
    def test_invalid(self, name: str, message: str) -> None:
        errors = ValidationErrors()
        validate_tenant_name("name", name, errors)
        assert _messages(errors) == [message]


@pytest.mark.unit
class TestValidateTimestamp:
    def test_past_is_valid(self) -> None:
        errors = ValidationErrors()
        validate_timestamp("created_at", datetime.now(UTC) - timedelta(seconds=1), errors)
        assert not errors.has_errors

    def test_none_is_empty(self) -> None:
        errors = ValidationErrors()
        validate_timestamp("created_at", None, errors)
        assert _messages(errors) == ["cannot be empty"]

    def test_future_rejected(self) -> None:
        errors = ValidationErrors()
        validate_timestamp("created_at", datetime.now(UTC) + timedelta(hours=1), errors)
        assert _messages(errors) == ["cannot be in the future"]

    def test_naive_treated_as_utc(self) -> None:
        errors = ValidationErrors()
        naive_future = (datetime.now(UTC) + timedelta(hours=1)).replace(tzinfo=None)
        validate_timestamp("created_at", naive_future, errors)
        assert _messages(errors) == ["cannot be in the future"]


@pytest.mark.unit
class TestValidateTenantStatus:
    @pytest.mark.parametrize("status", ["PROVISIONING", "ACTIVE", "SUSPENDED"])
    def test_valid(self, status: str) -> None:
        errors = ValidationErrors()
        validate_tenant_status("status", status, errors)
        assert not errors.has_errors

    @pytest.mark.parametrize("status", ["", "active", "DELETED"])
    def test_invalid(self, status: str) -> None:
        errors = ValidationErrors()
        validate_tenant_status("status", status, errors)
        assert _messages(errors) == ["must be one of [PROVISIONING ACTIVE SUSPENDED]"]


@pytest.mark.unit
class TestValidateBucketName:
    @pytest.mark.parametrize("name", ["abc", "apt-550e8400-test-tenant", "my.bucket.1"])
    def test_valid(self, name: str) -> None:
        errors = ValidationErrors()
        validate_bucket_name("bucket_name", name, errors)
        assert not errors.has_errors

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "cannot be empty"),
            ("ab", "must be between 3 and 63 characters"),
            ("a" * 64, "must be between 3 and 63 characters"),
            ("xn--bucket", "cannot start with 'xn--'"),
            ("my..bucket", "cannot contain consecutive periods"),
            ("my.-bucket", "cannot contain adjacent periods and hyphens"),
            ("my-.bucket", "cannot contain adjacent periods and hyphens"),
            ("My-Bucket", _BUCKET_CHARSET),
            ("bucket-", _BUCKET_CHARSET),
        ],
    )
    def test_invalid(self, name: str, message: str) -> None:
        errors = ValidationErrors()
        validate_bucket_name("bucket_name", name, errors)
        assert _messages(errors) == [message]

    def test_only_first_failure_reported(self) -> None:
        errors = ValidationErrors()
        # Starts with xn-- and also contains ".." and uppercase
        validate_bucket_name("bucket_name", "xn--A..b", errors)
        assert _messages(errors) == ["cannot start with 'xn--'"]


@pytest.mark.unit
class TestValidateRegion:
    @pytest.mark.parametrize("region", ["us-west-2", "eu-central-1", "ap-southeast-1"])
    def test_valid(self, region: str) -> None:
        errors = ValidationErrors()
        validate_region("region", region, errors)
        assert not errors.has_errors

    def test_empty(self) -> None:
        errors = ValidationErrors()
        validate_region("region", "", errors)
        assert _messages(errors) == ["cannot be empty"]

    @pytest.mark.parametrize("region", ["invalid-region", "US-WEST-2", "us-west-10", "us-west"])
    def test_invalid(self, region: str) -> None:
        errors = ValidationErrors()
        validate_region("region", region, errors)
        assert _messages(errors) == ["must be a valid AWS region code"]


@pytest.mark.unit
class TestValidateVersion:
    @pytest.mark.parametrize("version", [0, 1, 42])
    def test_valid(self, version: int) -> None:
        errors = ValidationErrors()
        validate_version("version", version, errors)
        assert not errors.has_errors

    def test_negative(self) -> None:
        errors = ValidationErrors()
        validate_version("version", -1, errors)
        assert _messages(errors) == ["must be non-negative"]
