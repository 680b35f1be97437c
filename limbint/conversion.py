"""Decimal string conversion for limb magnitudes.

Parsing and formatting both move in chunks of nine decimal digits: a chunk
always fits in one limb, so only single-limb multiply and divide are needed.
"""

from __future__ import annotations

from limbint.constants import DECIMAL_CHUNK_BASE, DECIMAL_CHUNK_DIGITS, POWERS_OF_TEN
from limbint.errors import InvalidFormat
from limbint.limbs import add_short, div_short, mul_short

__all__ = ["parse_decimal", "format_decimal"]


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """Parse an optionally signed decimal string.

    Args:
        text: One optional ``+``/``-`` followed by one or more ASCII digits

    Returns:
        Tuple of (negative, magnitude limbs). ``negative`` is False for zero,
        so "-0" parses as plain zero.

    Raises:
        InvalidFormat: If the string is empty, has no digits after the sign,
            or contains any other character
    """
    start = 1 if text[:1] in ("+", "-") else 0
    digits = text[start:]
    if not digits:
        raise InvalidFormat(f"Invalid decimal string: {text!r}")

    magnitude = [0]
    for i in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[i : i + DECIMAL_CHUNK_DIGITS]
        if not (chunk.isascii() and chunk.isdigit()):
            raise InvalidFormat(f"Invalid decimal string: {text!r}")
        magnitude = mul_short(magnitude, POWERS_OF_TEN[len(chunk)])
        add_short(magnitude, int(chunk))

    negative = text[0] == "-" and magnitude != [0]
    return negative, magnitude


def format_decimal(negative: bool, magnitude: list[int]) -> str:
    """Render a sign and magnitude as a canonical decimal string."""
    if magnitude == [0]:
        return "0"

    chunks = []
    while magnitude != [0]:
        magnitude, chunk = div_short(magnitude, DECIMAL_CHUNK_BASE)
        chunks.append(chunk)

    text = "".join(f"{chunk:09d}" for chunk in reversed(chunks)).lstrip("0")
    return "-" + text if negative else text
