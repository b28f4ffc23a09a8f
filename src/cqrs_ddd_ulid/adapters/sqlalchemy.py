"""SQLAlchemy column type storing ULIDs as 16-byte binary."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.dialects.mysql import BINARY
from sqlalchemy.dialects.postgresql import BYTEA
from sqlalchemy.types import LargeBinary, TypeDecorator

from ..codec import ULID_BYTE_LENGTH
from ..domain.ulid import Ulid
from ..primitives.exceptions import InvalidLengthError

logger = logging.getLogger("cqrs_ddd.ulid.persistence")


class UlidType(TypeDecorator[Ulid]):
    """
    Dialect-agnostic ULID type.
    Uses BYTEA on PostgreSQL, BINARY(16) on MySQL/MariaDB and a 16-byte
    LargeBinary elsewhere (like SQLite).
    """

    impl = LargeBinary
    cache_ok = True

    def load_dialect_impl(self, dialect: Any) -> Any:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(BYTEA())
        if dialect.name in ("mysql", "mariadb"):
            return dialect.type_descriptor(BINARY(ULID_BYTE_LENGTH))
        return dialect.type_descriptor(LargeBinary(ULID_BYTE_LENGTH))

    def process_bind_param(self, value: Any, dialect: Any) -> bytes | None:
        if value is None:
            return None
        if isinstance(value, Ulid):
            return value.to_binary()
        if isinstance(value, str):
            return Ulid.from_string(value).to_binary()
        if isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            if len(raw) != ULID_BYTE_LENGTH:
                raise InvalidLengthError(len(raw), ULID_BYTE_LENGTH)
            return raw
        raise TypeError(f"Cannot bind {type(value).__name__} to a ULID column")

    def process_result_value(self, value: Any, dialect: Any) -> Ulid | None:
        if value is None:
            return None
        try:
            return Ulid.from_binary(value)
        except InvalidLengthError as exc:
            logger.error("Stored ULID is corrupt: %s", exc)
            raise

    @property
    def python_type(self) -> type[Ulid]:
        return Ulid
