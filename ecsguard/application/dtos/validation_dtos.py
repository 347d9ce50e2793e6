"""
Validation DTOs

Architectural Intent:
- Data Transfer Objects for the validation use case boundary
- Input validation at the application boundary
- Decouples external representation from domain model
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ecsguard.domain.value_objects.field_error import FieldError


@dataclass(frozen=True)
class ValidateServerGroupRequest:
    payload: Mapping[str, Any]
    source: str = "<request>"

    def __post_init__(self) -> None:
        if not isinstance(self.payload, Mapping):
            raise ValueError(
                f"payload must be a JSON object, got {type(self.payload).__name__}"
            )
        if not self.source:
            raise ValueError("source cannot be empty")


@dataclass(frozen=True)
class ValidateServerGroupResponse:
    valid: bool
    errors: tuple[FieldError, ...] = ()
    source: str = "<request>"

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }
