"""Ulid <-> BSON Binary conversion for MongoDB documents."""

from __future__ import annotations

import logging
from typing import Any

from bson import Binary
from bson.binary import BINARY_SUBTYPE

from ..domain.ulid import Ulid
from ..primitives.exceptions import InvalidLengthError, InvalidUlidError
from ..validation.ulid import UlidValidator

logger = logging.getLogger("cqrs_ddd.ulid.persistence")


class UlidBsonTransformer:
    """Moves ULIDs across the Mongo persistence boundary.

    Identifiers are stored as generic-subtype ``Binary`` holding the 16-byte
    form, which keeps index order identical to the string order.
    """

    def __init__(self, validator: UlidValidator | None = None) -> None:
        self._validator = validator or UlidValidator()

    @property
    def validator(self) -> UlidValidator:
        return self._validator

    def transform_from_string(self, value: str) -> Ulid:
        """Parse untrusted text into a Ulid."""
        problem = self._validator.explain(value)
        if problem is not None:
            raise InvalidUlidError(value, problem)
        return Ulid(value)

    def to_binary(self, ulid: Ulid) -> Binary:
        return Binary(ulid.to_binary(), BINARY_SUBTYPE)

    def to_database_value(self, value: Any) -> Binary | None:
        if value is None:
            return None
        if isinstance(value, Binary):
            return value
        if isinstance(value, Ulid):
            return self.to_binary(value)
        if isinstance(value, str):
            return self.to_binary(self.transform_from_string(value))
        raise TypeError(f"Cannot store {type(value).__name__} as a ULID")

    def to_python_value(self, value: Any) -> Ulid | None:
        if value is None:
            return None
        if isinstance(value, Ulid):
            return value
        if isinstance(value, str):
            return self.transform_from_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            try:
                return Ulid.from_binary(value)
            except InvalidLengthError as exc:
                logger.error("Stored ULID is corrupt: %s", exc)
                raise
        raise TypeError(f"Cannot read {type(value).__name__} as a ULID")
