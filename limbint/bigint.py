"""Arbitrary-precision signed integers over two's-complement limbs.

This module provides BigInt, an immutable integer value with unbounded
magnitude that follows native signed integer semantics:
- Division truncates toward zero; the remainder takes the dividend's sign
- Bitwise operators act on the infinite two's-complement bit pattern
- Shifts are arithmetic; a negative amount shifts the other way
- Division by zero raises DivisionByZero

Usage pattern:
    from limbint import BigInt

    a = BigInt("123456789123456789123456789")
    b = BigInt(-7)

    q = a / b          # Truncating quotient
    r = a % b          # Same sign as a
    mask = (a >> 64) & 0xFFFF

    print(q, r, mask)
"""

from __future__ import annotations

import operator
from enum import Enum
from typing import ClassVar

from limbint.constants import LIMB_BITS, MASK, SIGN_BIT
from limbint.conversion import format_decimal, parse_decimal
from limbint.division import divmod_magnitude
from limbint.errors import DivisionByZero
from limbint.limbs import less_at_offset, shrink, sign_word

__all__ = ["BigInt", "BitOp"]


class BitOp(Enum):
    """Limb-wise bitwise operation."""

    AND = "and"
    OR = "or"
    XOR = "xor"

    def apply(self, a: int, b: int) -> int:
        if self is BitOp.AND:
            return a & b
        if self is BitOp.OR:
            return a | b
        return a ^ b


class BigInt:
    """Signed integer of unbounded magnitude.

    The value is a list of unsigned 32-bit limbs, least significant first,
    read as a two's-complement bit pattern that is sign-extended forever.
    ``_negative`` is the source of truth for the sign and for every limb
    beyond the stored ones. The limb list is always canonical: it never ends
    in a redundant sign-extension limb, and zero is ``[0]`` with
    ``_negative`` False.

    Instances are immutable; every operator returns a new BigInt.

    Attributes:
        limbs: The canonical limbs (read-only tuple)
        is_negative: True for values below zero
    """

    __slots__ = ("_negative", "_limbs")
    _negative: bool
    _limbs: list[int]

    ZERO: ClassVar[BigInt]
    ONE: ClassVar[BigInt]

    def __init__(self, value: int | str | BigInt = 0) -> None:
        """Create a BigInt from an int, a decimal string or another BigInt.

        Args:
            value: Native integer of any size, decimal string, or BigInt
                to copy. Defaults to zero.

        Raises:
            InvalidFormat: If a string is not a valid decimal integer
            TypeError: If value has any other type
        """
        if isinstance(value, BigInt):
            self._negative = value._negative
            self._limbs = value._limbs
        elif isinstance(value, int):
            self._negative, self._limbs = _limbs_from_int(value)
        elif isinstance(value, str):
            negative, magnitude = parse_decimal(value)
            self._negative = False
            self._limbs = magnitude
            if negative:
                self._negative, self._limbs = _negate_limbs(False, magnitude)
        else:
            raise TypeError(f"BigInt requires int, str or BigInt, got {type(value).__name__}")

    @classmethod
    def _from_parts(cls, negative: bool, limbs: list[int]) -> BigInt:
        """Wrap a working limb list, canonicalizing it in place."""
        result = cls.__new__(cls)
        result._negative = negative
        result._limbs = shrink(limbs, negative)
        return result

    @classmethod
    def from_str(cls, text: str) -> BigInt:
        """Parse a decimal string.

        Raises:
            InvalidFormat: If text is not an optionally signed digit run
        """
        return cls(text)

    # --- Representation ---

    @property
    def limbs(self) -> tuple[int, ...]:
        return tuple(self._limbs)

    @property
    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return not self._negative and self._limbs == [0]

    def digit_at(self, index: int) -> int:
        """Limb at index, or the sign-extension word past the stored limbs."""
        if index < len(self._limbs):
            return self._limbs[index]
        return sign_word(self._negative)

    def inverted_digit_at(self, index: int) -> int:
        """Bitwise complement of digit_at(index)."""
        if index < len(self._limbs):
            return ~self._limbs[index] & MASK
        return sign_word(not self._negative)

    def _magnitude(self) -> list[int]:
        """Limbs of abs(self). Callers must not mutate the result."""
        if self._negative:
            return _negate_limbs(True, self._limbs)[1]
        return self._limbs

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Canonical decimal form: optional '-', no leading zeros, '0' for zero."""
        return format_decimal(self._negative, self._magnitude())

    def __hash__(self) -> int:
        return hash(int(self))

    # --- Additive operations ---

    def _add(self, other: BigInt, subtract: bool) -> BigInt:
        """Ripple-add other (or its complement plus one) into a widened buffer.

        Two guard limbs above the longer operand absorb the carry out, so the
        top limb's high bit is the sign of the exact result.
        """
        size = max(len(self._limbs), len(other._limbs)) + 2
        digit = other.inverted_digit_at if subtract else other.digit_at
        carry = 1 if subtract else 0
        limbs = []
        for i in range(size):
            cur = self.digit_at(i) + digit(i) + carry
            limbs.append(cur & MASK)
            carry = cur >> LIMB_BITS
        return BigInt._from_parts(bool(limbs[-1] & SIGN_BIT), limbs)

    def __add__(self, other: BigInt | int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._add(other_val, subtract=False)

    def __radd__(self, other: int) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: BigInt | int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._add(other_val, subtract=True)

    def __rsub__(self, other: int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val._add(self, subtract=True)

    def __neg__(self) -> BigInt:
        """Two's-complement negation. Zero negates to itself."""
        if self.is_zero():
            return self
        negative, limbs = _negate_limbs(self._negative, self._limbs)
        return BigInt._from_parts(negative, limbs)

    def __pos__(self) -> BigInt:
        return self

    def __abs__(self) -> BigInt:
        return -self if self._negative else self

    def __invert__(self) -> BigInt:
        """Bitwise NOT: complement every limb and flip the sign, no carry."""
        return BigInt._from_parts(not self._negative, [~limb & MASK for limb in self._limbs])

    def increment(self) -> BigInt:
        """Return self + 1."""
        return self._add(BigInt.ONE, subtract=False)

    def decrement(self) -> BigInt:
        """Return self - 1."""
        return self._add(BigInt.ONE, subtract=True)

    # --- Multiplicative operations ---

    def __mul__(self, other: BigInt | int) -> BigInt:
        """Schoolbook product of the magnitudes, sign applied afterwards."""
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented

        negative = self._negative != other_val._negative
        a = self._magnitude()
        b = other_val._magnitude()

        limbs = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            carry = 0
            for j, y in enumerate(b):
                cur = limbs[i + j] + x * y + carry
                limbs[i + j] = cur & MASK
                carry = cur >> LIMB_BITS
            limbs[i + len(b)] = carry

        product = BigInt._from_parts(False, limbs)
        return -product if negative else product

    def __rmul__(self, other: int) -> BigInt:
        return self.__mul__(other)

    def _divmod(self, other: BigInt, symbol: str) -> tuple[BigInt, BigInt]:
        """Truncating division: quotient toward zero, remainder signed like self.

        Raises:
            DivisionByZero: If other is zero
        """
        if other.is_zero():
            kind = "Modulo" if symbol == "%" else "Division"
            raise DivisionByZero(f"{kind} by zero: {self} {symbol} 0")

        quotient_limbs, remainder_limbs = divmod_magnitude(self._magnitude(), other._magnitude())
        quotient = BigInt._from_parts(False, quotient_limbs)
        remainder = BigInt._from_parts(False, remainder_limbs)
        if self._negative != other._negative:
            quotient = -quotient
        if self._negative:
            remainder = -remainder
        return quotient, remainder

    def __truediv__(self, other: BigInt | int) -> BigInt:
        """Integer division truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._divmod(other_val, "/")[0]

    def __rtruediv__(self, other: int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val._divmod(self, "/")[0]

    def __mod__(self, other: BigInt | int) -> BigInt:
        """Remainder of truncating division; has the sign of self or is zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._divmod(other_val, "%")[1]

    def __rmod__(self, other: int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val._divmod(self, "%")[1]

    def __divmod__(self, other: BigInt | int) -> tuple[BigInt, BigInt]:
        """Quotient and remainder of truncating division in one pass.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._divmod(other_val, "/")

    def __rdivmod__(self, other: int) -> tuple[BigInt, BigInt]:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return other_val._divmod(self, "/")

    # --- Bitwise operations ---

    def _bitwise(self, other: BigInt, op: BitOp) -> BigInt:
        """Apply op to the sign-extended limbs and to the two sign bits."""
        size = max(len(self._limbs), len(other._limbs))
        limbs = [op.apply(self.digit_at(i), other.digit_at(i)) for i in range(size)]
        negative = bool(op.apply(self._negative, other._negative))
        return BigInt._from_parts(negative, limbs)

    def __and__(self, other: BigInt | int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._bitwise(other_val, BitOp.AND)

    def __rand__(self, other: int) -> BigInt:
        return self.__and__(other)

    def __or__(self, other: BigInt | int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._bitwise(other_val, BitOp.OR)

    def __ror__(self, other: int) -> BigInt:
        return self.__or__(other)

    def __xor__(self, other: BigInt | int) -> BigInt:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._bitwise(other_val, BitOp.XOR)

    def __rxor__(self, other: int) -> BigInt:
        return self.__xor__(other)

    # --- Shifts ---

    def __lshift__(self, amount: int) -> BigInt:
        """Arithmetic left shift; a negative amount shifts right."""
        try:
            amount = operator.index(amount)
        except TypeError:
            return NotImplemented
        if amount < 0:
            return self._shift_right(-amount)
        return self._shift_left(amount)

    def __rshift__(self, amount: int) -> BigInt:
        """Arithmetic right shift (rounds toward -inf); a negative amount shifts left."""
        try:
            amount = operator.index(amount)
        except TypeError:
            return NotImplemented
        if amount < 0:
            return self._shift_left(-amount)
        return self._shift_right(amount)

    def _shift_left(self, amount: int) -> BigInt:
        whole, bits = divmod(amount, LIMB_BITS)
        limbs = [0] * whole + self._limbs
        if bits:
            carry = 0
            for i in range(whole, len(limbs)):
                limb = limbs[i]
                limbs[i] = ((limb << bits) & MASK) | carry
                carry = limb >> (LIMB_BITS - bits)
            # Bits shifted out of the top limb, over the sign fill
            fill = (MASK << bits) & MASK if self._negative else 0
            limbs.append(fill | carry)
        return BigInt._from_parts(self._negative, limbs)

    def _shift_right(self, amount: int) -> BigInt:
        whole, bits = divmod(amount, LIMB_BITS)
        limbs = self._limbs[whole:]
        if bits:
            carry = (MASK << (LIMB_BITS - bits)) & MASK if self._negative else 0
            for i in range(len(limbs) - 1, -1, -1):
                limb = limbs[i]
                limbs[i] = (limb >> bits) | carry
                carry = (limb << (LIMB_BITS - bits)) & MASK
        if not limbs:
            limbs = [sign_word(self._negative)]
        return BigInt._from_parts(self._negative, limbs)

    # --- Comparison operations ---

    def compare(self, other: BigInt | int) -> int:
        """Three-way comparison: -1, 0 or 1."""
        other_val = _coerce(other)
        if other_val is None:
            raise TypeError(f"Cannot compare BigInt with {type(other).__name__}")
        return self._compare(other_val)

    def _compare(self, other_val: BigInt) -> int:
        if self._negative != other_val._negative:
            return -1 if self._negative else 1

        a, b = self._limbs, other_val._limbs
        if len(a) != len(b):
            # Extra limbs mean further from zero, in the direction of the sign
            longer = 1 if len(a) > len(b) else -1
            return -longer if self._negative else longer
        if less_at_offset(a, b):
            return -1
        if less_at_offset(b, a):
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._negative == other_val._negative and self._limbs == other_val._limbs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: BigInt | int) -> bool:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._compare(other_val) < 0

    def __le__(self, other: BigInt | int) -> bool:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._compare(other_val) <= 0

    def __gt__(self, other: BigInt | int) -> bool:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._compare(other_val) > 0

    def __ge__(self, other: BigInt | int) -> bool:
        other_val = _coerce(other)
        if other_val is None:
            return NotImplemented
        return self._compare(other_val) >= 0

    # --- Conversion ---

    def __int__(self) -> int:
        """Convert to a native int."""
        result = 0
        for limb in reversed(self._limbs):
            result = (result << LIMB_BITS) | limb
        if self._negative:
            result -= 1 << (LIMB_BITS * len(self._limbs))
        return result

    def __index__(self) -> int:
        """Support use as a shift amount, slice bound or list index."""
        return int(self)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()


def _limbs_from_int(value: int) -> tuple[bool, list[int]]:
    """Split a native int into canonical two's-complement limbs."""
    negative = value < 0
    limbs = []
    while True:
        limbs.append(value & MASK)
        value >>= LIMB_BITS
        if value in (0, -1):
            break
    return negative, shrink(limbs, negative)


def _negate_limbs(negative: bool, limbs: list[int]) -> tuple[bool, list[int]]:
    """Complement-plus-one over limbs widened by two guard limbs.

    Returns the sign and canonical limbs of the negated value. The input must
    not be zero.
    """
    fill = sign_word(not negative)
    result = []
    carry = 1
    for i in range(len(limbs) + 2):
        cur = (~limbs[i] & MASK if i < len(limbs) else fill) + carry
        result.append(cur & MASK)
        carry = cur >> LIMB_BITS
    return not negative, shrink(result, not negative)


def _coerce(value: object) -> BigInt | None:
    """Promote an int operand to BigInt; None for unsupported types."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(value)
    return None


BigInt.ZERO = BigInt(0)
BigInt.ONE = BigInt(1)
