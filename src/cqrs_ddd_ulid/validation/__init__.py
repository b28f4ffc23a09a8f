"""Validation: ValidationResult and ULID validators."""

from __future__ import annotations

from .result import ValidationResult
from .ulid import UlidFieldValidator, UlidValidator

__all__ = [
    "UlidFieldValidator",
    "UlidValidator",
    "ValidationResult",
]
