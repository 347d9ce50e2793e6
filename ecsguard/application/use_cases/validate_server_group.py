"""
Validate Server Group Use Case

Architectural Intent:
- Accepts or rejects a create-server-group request before it is executed
- Maps the request payload, runs the validation engine, reports the outcome
- The accept/reject decision is simply whether any finding was produced
"""

import logging

from ecsguard.application.description_mapper import description_from_dict
from ecsguard.application.dtos.validation_dtos import (
    ValidateServerGroupRequest,
    ValidateServerGroupResponse,
)
from ecsguard.domain.services.create_server_group_validator import (
    CreateServerGroupDescriptionValidator,
)

logger = logging.getLogger(__name__)


class ValidateServerGroup:
    def __init__(self, validator: CreateServerGroupDescriptionValidator):
        self.validator = validator

    def execute(self, request: ValidateServerGroupRequest) -> ValidateServerGroupResponse:
        description = description_from_dict(request.payload)
        errors = self.validator.validate(description)

        if errors:
            logger.info(
                "Rejected server group description from %s: %d finding(s)",
                request.source,
                len(errors),
            )
            for error in errors:
                logger.debug("%s: %s", request.source, error.qualified_code)
        else:
            logger.info("Accepted server group description from %s", request.source)

        return ValidateServerGroupResponse(
            valid=not errors, errors=errors, source=request.source
        )
