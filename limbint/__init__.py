"""limbint - arbitrary-precision signed integers over 32-bit limbs."""

from limbint.bigint import BigInt, BitOp
from limbint.errors import BigIntError, DivisionByZero, InvalidFormat, InvalidOperand

__version__ = "0.1.0"
__all__ = [
    "BigInt",
    "BitOp",
    "BigIntError",
    "DivisionByZero",
    "InvalidFormat",
    "InvalidOperand",
    "__version__",
]
