"""
Field Error Sink

Architectural Intent:
- Collects FieldError findings for a single validation pass
- The only side-effecting object in the engine: rules report through it and
  never raise, so every rule group always runs to completion
- Findings keep encounter order and are never deduplicated
"""

from typing import Iterator, Optional

from ecsguard.domain.value_objects.field_error import FieldError


class FieldErrors:
    def __init__(self, error_key: str = "") -> None:
        self._error_key = error_key
        self._errors: list[FieldError] = []

    @property
    def error_key(self) -> str:
        return self._error_key

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def reject(
        self, field_path: str, error_code: str, message: Optional[str] = None
    ) -> None:
        self._errors.append(
            FieldError(
                field_path=field_path,
                error_code=error_code,
                error_key=self._error_key,
                message=message,
            )
        )

    def errors(self) -> tuple[FieldError, ...]:
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(tuple(self._errors))

    def __repr__(self) -> str:
        return f"FieldErrors(error_key={self._error_key!r}, errors={self._errors!r})"
