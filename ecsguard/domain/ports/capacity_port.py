"""
Capacity Validator Port

Architectural Intent:
- Port for checking the min/desired/max capacity of a server group
- Implementations report through the shared FieldErrors sink and never raise
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from ecsguard.domain.entities.server_group_description import Capacity

if TYPE_CHECKING:
    from ecsguard.domain.services.field_errors import FieldErrors


@runtime_checkable
class CapacityValidatorPort(Protocol):
    def validate(self, capacity: Optional[Capacity], errors: FieldErrors) -> None:
        """Reject capacity fields that are missing or inconsistent."""
        ...
