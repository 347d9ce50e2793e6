"""
Capacity Validator

Domain Logic:
- capacity itself is required
- min, max and desired are each required and must not be negative
- when min and max are both known: min <= max and min <= desired <= max
"""

import logging
from typing import Optional

from ecsguard.domain.entities.server_group_description import Capacity
from ecsguard.domain.services.checks import (
    is_number,
    require_in_range,
    require_non_null,
)
from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.domain.value_objects.field_error import (
    EXCEEDS_MAX,
    INVALID,
    LESS_THAN_MIN,
)

logger = logging.getLogger(__name__)


class CapacityValidator:
    def validate(self, capacity: Optional[Capacity], errors: FieldErrors) -> None:
        if not require_non_null(errors, capacity, "capacity"):
            return

        require_non_null(errors, capacity.desired, "capacity.desired")
        require_non_null(errors, capacity.min, "capacity.min")
        require_non_null(errors, capacity.max, "capacity.max")

        require_in_range(errors, capacity.desired, 0, None, "capacity.desired")
        require_in_range(errors, capacity.min, 0, None, "capacity.min")
        require_in_range(errors, capacity.max, 0, None, "capacity.max")

        has_desired = is_number(capacity.desired)
        if is_number(capacity.min) and is_number(capacity.max):
            if capacity.min > capacity.max:
                errors.reject("capacity.min.max.range", INVALID)
            if has_desired and capacity.desired > capacity.max:
                errors.reject("capacity.desired", EXCEEDS_MAX)
            if has_desired and capacity.desired < capacity.min:
                errors.reject("capacity.desired", LESS_THAN_MIN)

        logger.debug(
            "Checked capacity min=%s desired=%s max=%s",
            capacity.min,
            capacity.desired,
            capacity.max,
        )
