"""
Composition Root

Architectural Intent:
- Dependency injection composition root for ecsguard
- Single place where collaborators, the validation engine and use cases are
  wired together

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Factory function builds everything from an EcsGuardConfig
"""

from dataclasses import dataclass
from typing import Optional

from ecsguard.application.use_cases.validate_server_group import ValidateServerGroup
from ecsguard.domain.services.capacity_validator import CapacityValidator
from ecsguard.domain.services.create_server_group_validator import (
    CreateServerGroupDescriptionValidator,
)
from ecsguard.infrastructure.config import EcsGuardConfig
from ecsguard.infrastructure.credentials.account_credentials_validator import (
    AccountCredentialsValidator,
)


@dataclass
class EcsGuardContainer:
    """DI container holding all wired dependencies."""

    config: EcsGuardConfig
    capacity_validator: CapacityValidator
    credentials_validator: AccountCredentialsValidator
    validator: CreateServerGroupDescriptionValidator
    validate_server_group: ValidateServerGroup


def create_container(config: Optional[EcsGuardConfig] = None) -> EcsGuardContainer:
    """Create and wire all dependencies."""
    config = config or EcsGuardConfig()

    capacity_validator = CapacityValidator()
    credentials_validator = AccountCredentialsValidator(config.credentials.accounts)
    validator = CreateServerGroupDescriptionValidator(
        credentials_validator,
        capacity_validator,
        error_key=config.validation.error_key,
    )
    validate_server_group = ValidateServerGroup(validator)

    return EcsGuardContainer(
        config=config,
        capacity_validator=capacity_validator,
        credentials_validator=credentials_validator,
        validator=validator,
        validate_server_group=validate_server_group,
    )
