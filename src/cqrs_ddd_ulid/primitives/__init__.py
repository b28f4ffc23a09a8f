"""Primitives: exceptions, ID generation."""

from __future__ import annotations

from .exceptions import InvalidLengthError, InvalidUlidError, UlidError
from .id_generator import IIDGenerator, UlidGenerator

__all__ = [
    "IIDGenerator",
    "InvalidLengthError",
    "InvalidUlidError",
    "UlidError",
    "UlidGenerator",
]
