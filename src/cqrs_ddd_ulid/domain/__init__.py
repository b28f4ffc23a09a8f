"""Domain layer: the Ulid value object."""

from __future__ import annotations

from .ulid import Ulid

__all__ = ["Ulid"]
