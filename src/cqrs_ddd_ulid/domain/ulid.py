"""Ulid — immutable identity value shared by every domain entity."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from ..codec import ULID_PATTERN, bytes_to_text, describe_problem, text_to_bytes
from ..codec.alphabet import TO_DIGITS
from ..primitives.exceptions import InvalidUlidError
from ..primitives.id_generator import UlidGenerator

if TYPE_CHECKING:
    from pydantic import GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

_TIMESTAMP_CHARS = 10


class Ulid(BaseModel):
    """Value object wrapping the canonical 26-character ULID string.

    Construction from a raw string performs no validation; use
    :meth:`from_string` at trust boundaries. Equality and ordering compare
    the string form, so two instances built from the same string are equal.

    As a pydantic field a ``Ulid`` accepts an instance, a string or 16 raw
    bytes, and serializes to the plain string::

        class Customer(BaseModel):
            id: Ulid

        Customer(id="01JKX8XGHVDZ46MWYMZT94YER4").model_dump()
        # {"id": "01JKX8XGHVDZ46MWYMZT94YER4"}
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(strict=True)

    def __init__(self, value: str, /) -> None:
        super().__init__(value=value)

    @model_validator(mode="before")
    @classmethod
    def coerce_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        if isinstance(data, (bytes, bytearray, memoryview)):
            return {"value": bytes_to_text(data)}
        return data

    @model_serializer
    def serialize_as_string(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # Same shape in validation and serialization mode.
        return {"type": "string", "pattern": ULID_PATTERN}

    # ── Constructors ─────────────────────────────────────────────

    @classmethod
    def from_string(cls, value: str) -> Ulid:
        """Build a Ulid from untrusted text, rejecting malformed input."""
        problem = describe_problem(value)
        if problem is not None:
            raise InvalidUlidError(value, problem)
        return cls(value)

    @classmethod
    def generate(cls, generator: UlidGenerator | None = None) -> Ulid:
        """Build a fresh Ulid from ``generator`` (a new UlidGenerator by default)."""
        return cls((generator or UlidGenerator()).next_id())

    @classmethod
    def from_binary(cls, data: bytes | bytearray | memoryview) -> Ulid:
        """Build a Ulid from its 16-byte binary form.

        Raises:
            InvalidLengthError: ``data`` is not exactly 16 bytes.
        """
        return cls(bytes_to_text(data))

    # ── Conversions ──────────────────────────────────────────────

    def to_binary(self) -> bytes:
        return text_to_bytes(self.value)

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds since the epoch held in the first 48 bits."""
        problem = describe_problem(self.value)
        if problem is not None:
            raise InvalidUlidError(self.value, problem)
        return int(self.value[:_TIMESTAMP_CHARS].translate(TO_DIGITS), 32)

    @property
    def datetime(self) -> dt.datetime:
        """UTC creation time decoded from :attr:`timestamp_ms`.

        Raises:
            InvalidUlidError: the value is not a canonical ULID.
            ValueError: the timestamp lies past year 9999, which ``datetime``
                cannot represent (the 48-bit maximum is in year 10889).
        """
        return dt.datetime.fromtimestamp(self.timestamp_ms / 1000, tz=dt.timezone.utc)

    # ── Comparison ───────────────────────────────────────────────

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Ulid):
            return NotImplemented
        return self.value >= other.value
