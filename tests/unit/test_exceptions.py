"""Unit tests for domain exceptions."""

import pytest

from gatekeeper.domain.exceptions import (
    GatekeeperError,
    InvalidOverrideInput,
    NotFound,
    PermissionDenied,
    PersistenceFailure,
    ValidationError,
)


def test_permission_denied_inherits_gatekeeper_error() -> None:
    """PermissionDenied is a subclass of GatekeeperError."""
    assert issubclass(PermissionDenied, GatekeeperError)


def test_persistence_failure_inherits_gatekeeper_error() -> None:
    assert issubclass(PersistenceFailure, GatekeeperError)


def test_invalid_override_input_is_validation_error() -> None:
    """Bad override input can be handled wherever validation errors are."""
    assert issubclass(InvalidOverrideInput, ValidationError)
    with pytest.raises(ValidationError):
        raise InvalidOverrideInput("bad user id")


def test_not_found_message_and_fields() -> None:
    err = NotFound("Role", "auditor")
    assert str(err) == "Role not found: auditor"
    assert err.entity == "Role"
    assert err.key == "auditor"


def test_raise_not_found_catchable_as_gatekeeper_error() -> None:
    """NotFound can be caught as GatekeeperError."""
    with pytest.raises(GatekeeperError):
        raise NotFound("Permission override", "7/users.view")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "User does not have permission to manage permissions"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
