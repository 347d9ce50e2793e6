"""
Field Error Value Object

Architectural Intent:
- Immutable record of one violated rule on one field of a description
- Addressed by a field path relative to the description root
- Carries the short error code and, via qualified_code, the fully keyed form
  consumed by the request layer (e.g. createServerGroupDescription.containerPort.invalid)
"""

from dataclasses import dataclass
from typing import Any, Optional

NOT_NULLABLE = "not.nullable"
INVALID = "invalid"
MUST_HAVE_ONLY_ONE = "must.have.only.one"
ITEM_INVALID = "item.invalid"
EXCEEDS_MAX = "exceeds.max"
LESS_THAN_MIN = "less.than.min"


@dataclass(frozen=True)
class FieldError:
    field_path: str
    error_code: str
    error_key: str = ""
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.field_path:
            raise ValueError("field_path cannot be empty")
        if not self.error_code:
            raise ValueError("error_code cannot be empty")

    @property
    def qualified_code(self) -> str:
        if not self.error_key:
            return f"{self.field_path}.{self.error_code}"
        return f"{self.error_key}.{self.field_path}.{self.error_code}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "field": self.field_path,
            "code": self.error_code,
            "qualifiedCode": self.qualified_code,
        }
        if self.message:
            data["message"] = self.message
        return data

    def __str__(self) -> str:
        if self.message:
            return f"{self.field_path}: {self.error_code} ({self.message})"
        return f"{self.field_path}: {self.error_code}"
