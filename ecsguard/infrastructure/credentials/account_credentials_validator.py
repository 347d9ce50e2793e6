"""
Account Credentials Validator

Architectural Intent:
- Implements CredentialsValidatorPort against a registry of known account names
- The registry is read-only configuration loaded at startup; an empty registry
  accepts any named account so the engine can run without account data

Design Decisions:
- Missing or blank credentials are reported as not.nullable
- Unknown accounts are reported as invalid
"""

import logging
from typing import Iterable, Optional

from ecsguard.domain.entities.server_group_description import is_not_blank
from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.domain.value_objects.field_error import INVALID, NOT_NULLABLE

logger = logging.getLogger(__name__)


class AccountCredentialsValidator:
    def __init__(self, known_accounts: Iterable[str] = ()) -> None:
        self._known_accounts = frozenset(known_accounts)

    @property
    def known_accounts(self) -> frozenset[str]:
        return self._known_accounts

    def validate(
        self, credentials: Optional[str], field_path: str, errors: FieldErrors
    ) -> None:
        if not is_not_blank(credentials):
            errors.reject(field_path, NOT_NULLABLE)
            return
        if self._known_accounts and credentials not in self._known_accounts:
            logger.debug("Unknown account %r for %s", credentials, field_path)
            errors.reject(field_path, INVALID)
