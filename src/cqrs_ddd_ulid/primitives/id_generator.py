from __future__ import annotations

import time
from typing import TYPE_CHECKING, Protocol

from ulid import ULID

if TYPE_CHECKING:
    from collections.abc import Callable


class IIDGenerator(Protocol):
    """
    Protocol for ID generation strategies.
    Entities take their identity from whichever generator is injected.
    """

    def next_id(self) -> object:
        """Generates the next unique identifier."""
        ...


class UlidGenerator(IIDGenerator):
    """
    ULID generator backed by ``python-ulid``.

    48-bit millisecond timestamp taken from ``clock`` (seconds since the
    epoch, like ``time.time``) followed by 80 random bits.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.time

    def next_id(self) -> str:
        """Returns the canonical string form of a fresh ULID."""
        return str(ULID.from_timestamp(float(self._clock())))
