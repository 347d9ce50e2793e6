"""Tests for the FieldError value object and the FieldErrors sink."""

import pytest
from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.domain.value_objects.field_error import FieldError


class TestFieldError:
    def test_qualified_code(self):
        error = FieldError("containerPort", "invalid", error_key="createServerGroupDescription")
        assert error.qualified_code == "createServerGroupDescription.containerPort.invalid"

    def test_qualified_code_without_key(self):
        assert FieldError("containerPort", "invalid").qualified_code == "containerPort.invalid"

    def test_empty_field_rejected(self):
        with pytest.raises(ValueError, match="field_path cannot be empty"):
            FieldError("", "invalid")

    def test_empty_code_rejected(self):
        with pytest.raises(ValueError, match="error_code cannot be empty"):
            FieldError("containerPort", "")

    def test_to_dict_includes_message_only_when_set(self):
        plain = FieldError("application", "not.nullable", error_key="k")
        assert plain.to_dict() == {
            "field": "application",
            "code": "not.nullable",
            "qualifiedCode": "k.application.not.nullable",
        }
        explained = FieldError("targetGroup", "invalid", message="pick one")
        assert explained.to_dict()["message"] == "pick one"

    def test_str(self):
        assert str(FieldError("targetGroup", "invalid", message="pick one")) == (
            "targetGroup: invalid (pick one)"
        )

    def test_frozen(self):
        error = FieldError("application", "not.nullable")
        with pytest.raises(AttributeError):
            error.field_path = "other"


class TestFieldErrors:
    def test_starts_empty(self):
        errors = FieldErrors("key")
        assert not errors.has_errors
        assert len(errors) == 0
        assert errors.errors() == ()

    def test_keeps_order_and_duplicates(self):
        errors = FieldErrors("key")
        errors.reject("serviceDiscoveryAssociations", "item.invalid")
        errors.reject("application", "not.nullable")
        errors.reject("serviceDiscoveryAssociations", "item.invalid")

        assert errors.has_errors
        assert [(e.field_path, e.error_code) for e in errors] == [
            ("serviceDiscoveryAssociations", "item.invalid"),
            ("application", "not.nullable"),
            ("serviceDiscoveryAssociations", "item.invalid"),
        ]

    def test_findings_carry_error_key_and_message(self):
        errors = FieldErrors("createServerGroupDescription")
        errors.reject("targetGroup", "invalid", "use mappings")
        (error,) = errors.errors()
        assert error.error_key == "createServerGroupDescription"
        assert error.message == "use mappings"

    def test_errors_returns_snapshot(self):
        errors = FieldErrors()
        errors.reject("application", "not.nullable")
        snapshot = errors.errors()
        errors.reject("ecsClusterName", "not.nullable")
        assert len(snapshot) == 1
        assert len(errors) == 2
