"""
Placement Strategy Type

Architectural Intent:
- Closed set of ECS task placement strategy types
- Each type owns the read-only set of fields it may be applied to
  (None means the type takes no field at all)
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

SPREAD_FIELDS = frozenset(
    {
        "instanceId",
        "attribute:ecs.availability-zone",
        "attribute:ecs.instance-type",
        "attribute:ecs.os-type",
        "attribute:ecs.ami-id",
    }
)

BINPACK_FIELDS = frozenset({"cpu", "memory"})


class PlacementStrategyType(Enum):
    RANDOM = "random"
    SPREAD = "spread"
    BINPACK = "binpack"

    @classmethod
    def from_value(cls, value: Optional[str]) -> PlacementStrategyType:
        """Parse a placement strategy type, ignoring case.

        Raises ValueError for a missing, blank or unknown value.
        """
        if value is None or not isinstance(value, str) or not value.strip():
            raise ValueError("Placement strategy type cannot be null or empty")
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Cannot create enum from {value} value!")

    @property
    def allowed_fields(self) -> Optional[frozenset[str]]:
        if self is PlacementStrategyType.SPREAD:
            return SPREAD_FIELDS
        if self is PlacementStrategyType.BINPACK:
            return BINPACK_FIELDS
        return None
