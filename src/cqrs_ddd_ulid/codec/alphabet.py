"""Crockford base32 alphabet and the fixed chunk layout of a ULID."""

from __future__ import annotations

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
BASE32_DIGITS = "0123456789abcdefghijklmnopqrstuv"

TO_DIGITS = str.maketrans(CROCKFORD_ALPHABET, BASE32_DIGITS)
TO_CROCKFORD = str.maketrans(BASE32_DIGITS, CROCKFORD_ALPHABET)

ULID_TEXT_LENGTH = 26
ULID_BYTE_LENGTH = 16

# 10 bits + 6 x 20 bits. The top two bits of the first chunk are always
# zero, so 2 base32 chars fit in 2 hex digits.
TEXT_CHUNK_WIDTHS = (2, 4, 4, 4, 4, 4, 4)
HEX_CHUNK_WIDTHS = (2, 5, 5, 5, 5, 5, 5)

# Canonical text form as a JSON-schema regex.
ULID_PATTERN = "^[0-7][0-9A-HJKMNP-TV-Z]{25}$"

_ALPHABET_SET = frozenset(CROCKFORD_ALPHABET)
_MAX_LEADING = "7"


def split(text: str, widths: tuple[int, ...]) -> list[str]:
    """Cut ``text`` into consecutive pieces of the given widths."""
    chunks = []
    offset = 0
    for width in widths:
        chunks.append(text[offset : offset + width])
        offset += width
    return chunks


def is_canonical(text: object) -> bool:
    """True if ``text`` is a 26-character uppercase Crockford ULID string."""
    if not isinstance(text, str) or len(text) != ULID_TEXT_LENGTH:
        return False
    if text[0] > _MAX_LEADING:
        return False
    return _ALPHABET_SET.issuperset(text)


def describe_problem(text: object) -> str | None:
    """Explain why ``text`` is not canonical, or ``None`` if it is."""
    if not isinstance(text, str):
        return f"expected str, got {type(text).__name__}"
    if len(text) != ULID_TEXT_LENGTH:
        return f"expected {ULID_TEXT_LENGTH} characters, got {len(text)}"
    invalid = sorted(set(text) - _ALPHABET_SET)
    if invalid:
        return f"characters outside the Crockford alphabet: {''.join(invalid)}"
    if text[0] > _MAX_LEADING:
        return "value exceeds 128 bits"
    return None
