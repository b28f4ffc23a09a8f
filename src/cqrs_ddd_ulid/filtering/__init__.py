"""Request filters compiled to MongoDB match fragments over binary ULIDs."""

from __future__ import annotations

from .equality import UlidEqualityFilter, is_ulid_property
from .range import OPERATORS, UlidRangeFilter

__all__ = [
    "OPERATORS",
    "UlidEqualityFilter",
    "UlidRangeFilter",
    "is_ulid_property",
]
