"""cqrs-ddd-ulid — ULID identity kernel for the CQRS/DDD toolkit.

Canonical 26-character Crockford base32 text <-> 16-byte binary, the
immutable ``Ulid`` value object, and the adapters that carry it across the
SQLAlchemy and MongoDB persistence boundaries.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import UlidBsonTransformer, UlidType

# ── Codec ────────────────────────────────────────────────────────
from .codec import (
    CROCKFORD_ALPHABET,
    ULID_BYTE_LENGTH,
    ULID_TEXT_LENGTH,
    bytes_to_text,
    is_canonical,
    text_to_bytes,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import Ulid

# ── Filtering ────────────────────────────────────────────────────
from .filtering import UlidEqualityFilter, UlidRangeFilter

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    IIDGenerator,
    InvalidLengthError,
    InvalidUlidError,
    UlidError,
    UlidGenerator,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import UlidFieldValidator, UlidValidator, ValidationResult

__all__: list[str] = [
    # Codec
    "CROCKFORD_ALPHABET",
    "ULID_BYTE_LENGTH",
    "ULID_TEXT_LENGTH",
    "bytes_to_text",
    "is_canonical",
    "text_to_bytes",
    # Domain
    "Ulid",
    # Primitives
    "IIDGenerator",
    "InvalidLengthError",
    "InvalidUlidError",
    "UlidError",
    "UlidGenerator",
    # Validation
    "UlidFieldValidator",
    "UlidValidator",
    "ValidationResult",
    # Adapters
    "UlidBsonTransformer",
    "UlidType",
    # Filtering
    "UlidEqualityFilter",
    "UlidRangeFilter",
]
