"""Exceptions raised by the ULID codec, value type and adapters."""

from __future__ import annotations


class UlidError(Exception):
    """Root exception for the cqrs-ddd-ulid package."""


class InvalidUlidError(UlidError, ValueError):
    """Raised when a value is not a canonical 26-character ULID string."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        msg = f"Invalid ULID format: {value!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class InvalidLengthError(InvalidUlidError):
    """Raised when a binary ULID is not exactly 16 bytes.

    Stored identifiers are never expected to be malformed, so callers at the
    persistence boundary should treat this as a data-integrity fault.
    """

    def __init__(self, length: int, expected: int = 16) -> None:
        self.length = length
        self.expected = expected
        self.value = None
        self.reason = f"expected {expected} bytes, got {length}"
        # Skip InvalidUlidError.__init__: there is no text value to report.
        super(InvalidUlidError, self).__init__(
            f"from_binary expects a {expected}-byte binary string, "
            f"got {length} bytes"
        )
