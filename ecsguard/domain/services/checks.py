"""
Primitive Checks

Reusable field checks shared by the description validators. Each check writes
at most one finding to the sink and returns True when the value passed.
"""

import math
from numbers import Integral, Real
from typing import Any, Iterable, Optional

from ecsguard.domain.services.field_errors import FieldErrors
from ecsguard.domain.value_objects.field_error import INVALID, NOT_NULLABLE


def is_number(value: Any) -> bool:
    """True for whole, finite numbers. Booleans, NaN, infinities and
    fractional values such as 80.5 are not counts, ports or sizes."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def require_non_null(errors: FieldErrors, value: Any, field_path: str) -> bool:
    if value is None:
        errors.reject(field_path, NOT_NULLABLE)
        return False
    return True


def require_in_range(
    errors: FieldErrors,
    value: Any,
    lo: Optional[float],
    hi: Optional[float],
    field_path: str,
) -> bool:
    """Reject a present value outside [lo, hi]; an absent value passes.

    Values that are not whole, finite numbers are out of range by definition.
    """
    if value is None:
        return True
    if (
        not is_number(value)
        or (lo is not None and value < lo)
        or (hi is not None and value > hi)
    ):
        errors.reject(field_path, INVALID)
        return False
    return True


def require_member(
    errors: FieldErrors,
    value: Any,
    allowed: frozenset,
    field_path: str,
    allow_absent: bool = True,
) -> bool:
    if value is None and allow_absent:
        return True
    try:
        ok = value in allowed
    except TypeError:
        ok = False
    if not ok:
        errors.reject(field_path, INVALID)
    return ok


def require_disjoint(
    errors: FieldErrors, keys: Iterable[Any], reserved: frozenset, field_path: str
) -> bool:
    if reserved.isdisjoint(keys):
        return True
    errors.reject(field_path, INVALID)
    return False


def require_paired(
    errors: FieldErrors,
    has_first: bool,
    has_second: bool,
    first_path: str,
    second_path: str,
) -> bool:
    """When exactly one of two related values is set, reject the missing one."""
    if has_first and not has_second:
        errors.reject(second_path, NOT_NULLABLE)
        return False
    if has_second and not has_first:
        errors.reject(first_path, NOT_NULLABLE)
        return False
    return True
