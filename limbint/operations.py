"""Named BigInt operations shared by the HTTP service and the CLI."""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum

from limbint.bigint import BigInt
from limbint.errors import InvalidOperand


class Operation(str, Enum):
    """Operation names accepted by the service and the CLI."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    DIVMOD = "divmod"
    AND = "and"
    OR = "or"
    XOR = "xor"
    SHL = "shl"
    SHR = "shr"
    CMP = "cmp"
    NEG = "neg"
    INVERT = "invert"
    INC = "inc"
    DEC = "dec"
    ABS = "abs"

    @property
    def is_unary(self) -> bool:
        return self in _UNARY


# Operator spellings accepted by the CLI in place of names
SYMBOLS = {
    "+": Operation.ADD,
    "-": Operation.SUB,
    "*": Operation.MUL,
    "/": Operation.DIV,
    "%": Operation.MOD,
    "&": Operation.AND,
    "|": Operation.OR,
    "^": Operation.XOR,
    "<<": Operation.SHL,
    ">>": Operation.SHR,
    "~": Operation.INVERT,
}

_UNARY: dict[Operation, Callable[[BigInt], BigInt]] = {
    Operation.NEG: operator.neg,
    Operation.INVERT: operator.invert,
    Operation.INC: BigInt.increment,
    Operation.DEC: BigInt.decrement,
    Operation.ABS: operator.abs,
}

_BINARY: dict[Operation, Callable[[BigInt, BigInt], BigInt]] = {
    Operation.ADD: operator.add,
    Operation.SUB: operator.sub,
    Operation.MUL: operator.mul,
    Operation.DIV: operator.truediv,
    Operation.MOD: operator.mod,
    Operation.AND: operator.and_,
    Operation.OR: operator.or_,
    Operation.XOR: operator.xor,
}


def parse_operation(name: str) -> Operation:
    """Resolve an operation name or operator symbol.

    Raises:
        InvalidOperand: If the name is not a known operation
    """
    if name in SYMBOLS:
        return SYMBOLS[name]
    try:
        return Operation(name.lower())
    except ValueError as err:
        raise InvalidOperand(f"Unknown operation: {name!r}") from err


def evaluate(
    op: Operation,
    lhs: BigInt,
    rhs: BigInt | None = None,
    *,
    max_shift: int | None = None,
) -> tuple[BigInt, BigInt | None]:
    """Apply op to its operands.

    Args:
        op: Operation to apply
        lhs: Left operand (the only operand for unary operations)
        rhs: Right operand, required for binary operations
        max_shift: Largest allowed shift amount in either direction

    Returns:
        Tuple of (result, remainder). The remainder is only set for DIVMOD.

    Raises:
        InvalidOperand: If rhs is missing for a binary operation, given for a
            unary one, or a shift amount is out of range
        DivisionByZero: If a division or modulo has a zero rhs
    """
    if op.is_unary:
        if rhs is not None:
            raise InvalidOperand(f"Operation '{op.value}' takes no right operand")
        return _UNARY[op](lhs), None

    if rhs is None:
        raise InvalidOperand(f"Operation '{op.value}' requires a right operand")

    if op is Operation.DIVMOD:
        quotient, remainder = divmod(lhs, rhs)
        return quotient, remainder
    if op is Operation.CMP:
        return BigInt(lhs.compare(rhs)), None
    if op in (Operation.SHL, Operation.SHR):
        amount = int(rhs)
        if max_shift is not None and abs(amount) > max_shift:
            raise InvalidOperand(f"Shift amount {amount} exceeds limit of {max_shift}")
        return (lhs << amount if op is Operation.SHL else lhs >> amount), None

    return _BINARY[op](lhs, rhs), None
