"""Range filtering over binary ULID fields (``ulid[lt]=...`` style)."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bson import Binary

from ..adapters.bson import UlidBsonTransformer
from ..primitives.exceptions import InvalidUlidError

logger = logging.getLogger("cqrs_ddd.ulid.filtering")

_MONGO_OP_MAP: dict[str, str] = {
    "lt": "$lt",
    "lte": "$lte",
    "gt": "$gt",
    "gte": "$gte",
}
BETWEEN = "between"
OPERATORS: tuple[str, ...] = (*_MONGO_OP_MAP, BETWEEN)
RANGE_SEPARATOR = ".."


class UlidRangeFilter:
    """Compiles ``{property: {operator: value}}`` filters into Mongo match
    fragments.

    ULIDs sort by creation time, so ``lt``/``gt`` on an id field is a range
    over creation timestamps. ``between`` takes ``"<min>..<max>"`` and is
    inclusive on both ends. Values that cannot be parsed are dropped, the
    same way an API filter ignores a bad query parameter.
    """

    def __init__(
        self,
        properties: Iterable[str],
        transformer: UlidBsonTransformer | None = None,
    ) -> None:
        self._properties = tuple(properties)
        self._transformer = transformer or UlidBsonTransformer()

    @property
    def properties(self) -> tuple[str, ...]:
        return self._properties

    def description(self) -> dict[str, dict[str, Any]]:
        """One entry per ``property[operator]`` query parameter."""
        return {
            f"{prop}[{op}]": {
                "property": prop,
                "type": "string",
                "required": False,
                "description": f"Filter on the {prop} property using the {op} operator",
            }
            for prop in self._properties
            for op in OPERATORS
        }

    def apply(self, filters: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Compile the configured properties of ``filters`` into match fragments."""
        fragments: list[dict[str, Any]] = []
        for prop, value in filters.items():
            if prop not in self._properties:
                continue
            if not isinstance(value, Mapping):
                logger.debug("Ignoring non-operator filter on %s", prop)
                continue
            for op, raw in value.items():
                fragment = self._compile(prop, op, raw)
                if fragment is not None:
                    fragments.append(fragment)
        return fragments

    def build_query(self, filters: Mapping[str, Any]) -> dict[str, Any]:
        """Combine the fragments from :meth:`apply` into one Mongo query."""
        fragments = self.apply(filters)
        if not fragments:
            return {}
        if len(fragments) == 1:
            return fragments[0]
        return {"$and": fragments}

    def _compile(self, prop: str, op: str, raw: Any) -> dict[str, Any] | None:
        if op not in OPERATORS:
            logger.debug("Ignoring unknown operator %r on %s", op, prop)
            return None
        if not isinstance(raw, str) or not raw:
            logger.debug(
                "Ignoring %s[%s]: expected a non-empty string, got %r", prop, op, raw
            )
            return None
        try:
            if op == BETWEEN:
                low, high = self._parse_range(raw)
                return {prop: {"$gte": low, "$lte": high}}
            return {prop: {_MONGO_OP_MAP[op]: self._to_binary(raw)}}
        except InvalidUlidError as exc:
            logger.debug("Ignoring %s[%s]: %s", prop, op, exc)
            return None

    def _parse_range(self, raw: str) -> tuple[Binary, Binary]:
        if RANGE_SEPARATOR not in raw:
            raise InvalidUlidError(raw, f"between expects '<min>{RANGE_SEPARATOR}<max>'")
        low, high = raw.split(RANGE_SEPARATOR, 1)
        return self._to_binary(low.strip()), self._to_binary(high.strip())

    def _to_binary(self, raw: str) -> Binary:
        return self._transformer.to_binary(self._transformer.transform_from_string(raw))
