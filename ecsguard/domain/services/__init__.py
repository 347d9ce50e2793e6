"""
Domain Services Package

Architectural Intent:
- Contains the validation engine and the checks it is composed from
"""

from ecsguard.domain.services.capacity_validator import CapacityValidator
from ecsguard.domain.services.create_server_group_validator import (
    CreateServerGroupDescriptionValidator,
    RESERVED_ENVIRONMENT_VARIABLES,
)
from ecsguard.domain.services.field_errors import FieldErrors

__all__ = [
    "CapacityValidator",
    "CreateServerGroupDescriptionValidator",
    "RESERVED_ENVIRONMENT_VARIABLES",
    "FieldErrors",
]
