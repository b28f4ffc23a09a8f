"""ULID validators.

Validators are plain instances handed to whoever needs them; there is no
shared module-level validator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ulid import ULID

from ..codec import describe_problem, is_canonical
from ..domain.ulid import Ulid
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable


class UlidValidator:
    """Checks whether a value is, or can be read as, a canonical ULID."""

    def is_valid(self, value: object) -> bool:
        if isinstance(value, Ulid):
            return is_canonical(value.value)
        if isinstance(value, ULID):
            return True
        return is_canonical(value)

    def explain(self, value: object) -> str | None:
        """Return the reason ``value`` is invalid, or ``None``."""
        if isinstance(value, ULID):
            return None
        if isinstance(value, Ulid):
            return describe_problem(value.value)
        if value is None:
            return "value is required"
        return describe_problem(value)


class UlidFieldValidator:
    """Validates the ULID-typed attributes of a command or DTO.

    Collects one error per invalid field rather than failing fast::

        validator = UlidFieldValidator(["customer_id", "type_id"])
        result = await validator.validate(command)
    """

    def __init__(
        self,
        fields: Iterable[str],
        validator: UlidValidator | None = None,
        *,
        required: bool = False,
    ) -> None:
        self._fields = tuple(fields)
        self._validator = validator or UlidValidator()
        self._required = required

    async def validate(self, command: Any) -> ValidationResult:
        result = ValidationResult.success()
        for name in self._fields:
            value = getattr(command, name, None)
            if value is None and not self._required:
                continue
            problem = self._validator.explain(value)
            if problem is not None:
                result.add_error(name, f"is not a valid ULID: {problem}")
        return result
