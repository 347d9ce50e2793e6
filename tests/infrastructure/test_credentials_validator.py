"""Tests for the account credentials validator."""

import pytest
from ecsguard.domain.ports.credentials_port import CredentialsValidatorPort
from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.infrastructure.credentials.account_credentials_validator import (
    AccountCredentialsValidator,
)


def _validate(validator, credentials) -> list[tuple[str, str]]:
    errors = FieldErrors()
    validator.validate(credentials, "credentials", errors)
    return [(e.field_path, e.error_code) for e in errors]


class TestAccountCredentialsValidator:
    def test_implements_port(self):
        assert isinstance(AccountCredentialsValidator(), CredentialsValidatorPort)

    @pytest.mark.parametrize("credentials", [None, "", "   "])
    def test_missing(self, credentials):
        assert _validate(AccountCredentialsValidator(), credentials) == [
            ("credentials", "not.nullable")
        ]

    def test_any_account_without_registry(self):
        assert _validate(AccountCredentialsValidator(), "whatever") == []

    def test_known_account(self):
        validator = AccountCredentialsValidator(["prod", "test"])
        assert validator.known_accounts == frozenset({"prod", "test"})
        assert _validate(validator, "prod") == []

    def test_unknown_account(self):
        validator = AccountCredentialsValidator(["prod"])
        assert _validate(validator, "staging") == [("credentials", "invalid")]

    def test_uses_given_field_path(self):
        errors = FieldErrors()
        AccountCredentialsValidator().validate(None, "account", errors)
        assert errors.errors()[0].field_path == "account"
