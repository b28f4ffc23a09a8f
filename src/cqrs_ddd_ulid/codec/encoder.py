"""Text -> binary: 26 Crockford base32 characters to 16 bytes."""

from __future__ import annotations

from ..primitives.exceptions import InvalidUlidError
from .alphabet import (
    HEX_CHUNK_WIDTHS,
    TEXT_CHUNK_WIDTHS,
    TO_DIGITS,
    describe_problem,
    split,
)


def text_to_bytes(text: str) -> bytes:
    """Encode a canonical ULID string as its 16-byte binary form.

    The string is translated to the ``0-9a-v`` digit set, cut into the
    2 + 6x4 character chunks of the ULID bit layout, and each chunk is
    converted to zero-padded hex (2 digits for the first chunk, 5 for the
    rest) before the 32 hex digits are packed into bytes.

    Raises:
        InvalidUlidError: ``text`` is not a canonical ULID string.
    """
    problem = describe_problem(text)
    if problem is not None:
        raise InvalidUlidError(text, problem)

    chunks = split(text.translate(TO_DIGITS), TEXT_CHUNK_WIDTHS)
    hex_digits = "".join(
        format(int(chunk, 32), "x").zfill(width)
        for chunk, width in zip(chunks, HEX_CHUNK_WIDTHS, strict=True)
    )
    return bytes.fromhex(hex_digits)
