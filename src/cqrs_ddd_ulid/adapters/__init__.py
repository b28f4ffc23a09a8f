"""Persistence adapters: the only places a Ulid crosses into storage."""

from __future__ import annotations

from .bson import UlidBsonTransformer
from .sqlalchemy import UlidType

__all__ = ["UlidBsonTransformer", "UlidType"]
