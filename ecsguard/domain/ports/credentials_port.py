"""
Credentials Validator Port

Architectural Intent:
- Port for resolving the account named by a description's credentials
- Implementations report through the shared FieldErrors sink and never raise
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ecsguard.domain.services.field_errors import FieldErrors


@runtime_checkable
class CredentialsValidatorPort(Protocol):
    def validate(
        self, credentials: Optional[str], field_path: str, errors: FieldErrors
    ) -> None:
        """Reject field_path if the credentials do not name a known account."""
        ...
