"""BigInt error classes."""


class BigIntError(ArithmeticError):
    """Base class for BigInt errors."""

    pass


class InvalidFormat(BigIntError, ValueError):
    """String is not an optionally signed run of ASCII decimal digits."""

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """Division or modulo by zero."""

    pass


class InvalidOperand(BigIntError, ValueError):
    """Operand missing or out of range for the requested operation."""

    pass
