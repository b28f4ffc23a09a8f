"""Exact-match filtering on id-like properties."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..adapters.bson import UlidBsonTransformer

logger = logging.getLogger("cqrs_ddd.ulid.filtering")


def is_ulid_property(name: str) -> bool:
    """``id``, ``customerId`` and ``customer_id`` are ULID keys."""
    return name == "id" or name.endswith("Id") or name.endswith("_id")


class UlidEqualityFilter:
    """Turns ``{"customerId": "<ulid>"}`` into ``{"customerId": Binary(...)}``."""

    def __init__(self, transformer: UlidBsonTransformer | None = None) -> None:
        self._transformer = transformer or UlidBsonTransformer()
        self._validator = self._transformer.validator

    def apply(self, filters: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Return one match fragment per id-like property holding a valid ULID."""
        fragments = []
        for prop, value in filters.items():
            if not is_ulid_property(prop):
                continue
            if not isinstance(value, str) or not self._validator.is_valid(value):
                logger.debug("Ignoring invalid ULID filter value for %s", prop)
                continue
            fragments.append({prop: self._transformer.to_database_value(value)})
        return fragments
