"""Primitives over raw limb lists.

These helpers work on plain ``list[int]`` values holding 32-bit limbs, least
significant first. Unless noted otherwise the lists are non-negative
magnitudes: the division and decimal conversion code never sees a sign.
"""

from __future__ import annotations

from limbint.constants import LIMB_BITS, MASK

__all__ = [
    "sign_word",
    "shrink",
    "less_at_offset",
    "mul_short",
    "add_short",
    "div_short",
    "offset_sub",
]


def sign_word(negative: bool) -> int:
    """Return the limb that fills the infinite sign extension."""
    return MASK if negative else 0


def shrink(limbs: list[int], negative: bool) -> list[int]:
    """Drop redundant top limbs in place and return the list.

    A top limb is redundant when it equals the sign-extension word and at
    least one other limb remains. The result is the canonical form.
    """
    fill = sign_word(negative)
    while len(limbs) > 1 and limbs[-1] == fill:
        limbs.pop()
    return limbs


def less_at_offset(a: list[int], b: list[int], offset: int = 0) -> bool:
    """Check whether magnitude ``a`` is below ``b`` shifted up by ``offset`` limbs.

    Only limbs of ``a`` at or above ``offset`` take part: the low limbs of
    ``a`` cannot make it reach the next multiple of ``BASE**offset``. Missing
    limbs on either side read as zero.

    Args:
        a: Non-negative limbs
        b: Non-negative limbs
        offset: Number of limbs ``b`` is shifted left by

    Returns:
        True if a < b * BASE**offset
    """
    top = max(len(a), len(b) + offset)
    for i in range(top - 1, offset - 1, -1):
        x = a[i] if i < len(a) else 0
        j = i - offset
        y = b[j] if j < len(b) else 0
        if x != y:
            return x < y
    return False


def mul_short(limbs: list[int], factor: int) -> list[int]:
    """Multiply a magnitude by a single limb, returning new canonical limbs."""
    result = []
    carry = 0
    for limb in limbs:
        cur = limb * factor + carry
        result.append(cur & MASK)
        carry = cur >> LIMB_BITS
    result.append(carry)
    return shrink(result, False)


def add_short(limbs: list[int], addend: int) -> list[int]:
    """Add a single limb to a magnitude in place and return the list."""
    carry = addend
    i = 0
    while carry:
        if i == len(limbs):
            limbs.append(0)
        cur = limbs[i] + carry
        limbs[i] = cur & MASK
        carry = cur >> LIMB_BITS
        i += 1
    return limbs


def div_short(limbs: list[int], divisor: int) -> tuple[list[int], int]:
    """Divide a magnitude by a single non-zero limb.

    Scans from the most significant limb down, folding the running remainder
    into the next limb as ``remainder * BASE + limb``.

    Returns:
        Tuple of (quotient limbs, remainder)
    """
    quotient = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        cur = (remainder << LIMB_BITS) | limbs[i]
        quotient[i] = cur // divisor
        remainder = cur - quotient[i] * divisor
    return shrink(quotient, False), remainder


def offset_sub(limbs: list[int], other: list[int], offset: int) -> list[int]:
    """Subtract ``other * BASE**offset`` from ``limbs`` in place.

    Works as ``limbs + ~other + 1`` over the window starting at ``offset``;
    limbs below the window are left untouched. The caller guarantees the
    result is non-negative, so the final carry out is discarded.
    """
    carry = 1
    for i in range(offset, len(limbs)):
        j = i - offset
        inverted = (~other[j] & MASK) if j < len(other) else MASK
        cur = limbs[i] + inverted + carry
        limbs[i] = cur & MASK
        carry = cur >> LIMB_BITS
    return shrink(limbs, False)
