"""Binary -> text: 16 bytes to 26 Crockford base32 characters."""

from __future__ import annotations

from ..primitives.exceptions import InvalidLengthError
from .alphabet import (
    BASE32_DIGITS,
    HEX_CHUNK_WIDTHS,
    TEXT_CHUNK_WIDTHS,
    TO_CROCKFORD,
    ULID_BYTE_LENGTH,
    split,
)


def bytes_to_text(data: bytes | bytearray | memoryview) -> str:
    """Decode a 16-byte binary ULID into its canonical string form.

    Leading zero characters are preserved: the result is always exactly
    26 characters wide.

    Raises:
        TypeError: ``data`` is not bytes-like.
        InvalidLengthError: ``data`` is not exactly 16 bytes long.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"from_binary expects a bytes-like object, got {type(data).__name__}"
        )
    raw = bytes(data)
    if len(raw) != ULID_BYTE_LENGTH:
        raise InvalidLengthError(len(raw), ULID_BYTE_LENGTH)

    chunks = split(raw.hex(), HEX_CHUNK_WIDTHS)
    digits = "".join(
        _to_base32(int(chunk, 16)).zfill(width)
        for chunk, width in zip(chunks, TEXT_CHUNK_WIDTHS, strict=True)
    )
    return digits.translate(TO_CROCKFORD)


def _to_base32(number: int) -> str:
    if number == 0:
        return "0"
    out = []
    while number:
        number, rem = divmod(number, 32)
        out.append(BASE32_DIGITS[rem])
    return "".join(reversed(out))
