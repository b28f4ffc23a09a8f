"""ULID codec: canonical Crockford base32 text <-> 16-byte binary."""

from __future__ import annotations

from .alphabet import (
    CROCKFORD_ALPHABET,
    ULID_BYTE_LENGTH,
    ULID_PATTERN,
    ULID_TEXT_LENGTH,
    describe_problem,
    is_canonical,
)
from .decoder import bytes_to_text
from .encoder import text_to_bytes

__all__ = [
    "CROCKFORD_ALPHABET",
    "ULID_BYTE_LENGTH",
    "ULID_PATTERN",
    "ULID_TEXT_LENGTH",
    "bytes_to_text",
    "describe_problem",
    "is_canonical",
    "text_to_bytes",
]
