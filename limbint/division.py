"""Magnitude division: single-limb fast path and Knuth Algorithm D.

Both operands are non-negative limb lists and the divisor is non-zero; sign
handling and the zero check live in :class:`limbint.bigint.BigInt`.
"""

from __future__ import annotations

from limbint.constants import BASE, LIMB_BITS, MASK
from limbint.limbs import div_short, less_at_offset, mul_short, offset_sub, shrink

__all__ = ["divmod_magnitude", "long_divmod"]


def divmod_magnitude(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """Divide two magnitudes.

    Args:
        dividend: Non-negative canonical limbs
        divisor: Non-negative canonical limbs, not zero

    Returns:
        Tuple of (quotient limbs, remainder limbs), both canonical
    """
    if len(divisor) == 1:
        quotient, remainder = div_short(dividend, divisor[0])
        return quotient, [remainder]
    if len(divisor) > len(dividend):
        # Quotient cannot be non-zero; the dividend is already the remainder
        return [0], list(dividend)
    return long_divmod(dividend, divisor)


def long_divmod(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """Normalized long division for divisors of two or more limbs.

    The dividend and divisor are first scaled by
    ``f = BASE // (top_divisor_limb + 1)``, which lifts the divisor's top
    limb to at least ``BASE / 2``. Each quotient limb is then estimated from
    the top two remainder limbs and the top divisor limb; after scaling the
    estimate is never low and at most two above the true digit, so the
    correction loop below runs at most twice per position.

    Args:
        dividend: Non-negative limbs with len(dividend) >= len(divisor)
        divisor: Non-negative canonical limbs with len(divisor) >= 2

    Returns:
        Tuple of (quotient limbs, remainder limbs), both canonical
    """
    factor = BASE // (divisor[-1] + 1)
    remainder = mul_short(dividend, factor)
    divisor = mul_short(divisor, factor)

    n = len(divisor)
    m = len(remainder)
    top = divisor[-1]
    quotient = [0] * (m - n + 1)

    for k in range(m - n, -1, -1):
        if len(remainder) < n + k:
            # Remainder already below divisor * BASE**k: digit stays zero
            continue

        high = remainder[n + k] if n + k < len(remainder) else 0
        window = (high << LIMB_BITS) | remainder[n + k - 1]
        q = min(MASK, window // top)

        trial = mul_short(divisor, q)
        while less_at_offset(remainder, trial, k):
            q -= 1
            offset_sub(trial, divisor, 0)

        offset_sub(remainder, trial, k)
        quotient[k] = q

    remainder, _ = div_short(remainder, factor)
    return shrink(quotient, False), remainder
