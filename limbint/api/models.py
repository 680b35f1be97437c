"""Pydantic models for the evaluation service."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from limbint.operations import Operation


def validate_operand(value: Any) -> str:
    """Normalize an operand to a string.

    Digit limits and decimal parsing are applied by the endpoint, against
    the injected ServiceConfig, before any arithmetic runs.

    Args:
        value: Value to validate (string or int)

    Returns:
        Operand as string

    Raises:
        ValueError: If value is neither a string nor an int
    """
    if isinstance(value, bool):
        raise ValueError("Operand must be a decimal string or int, got bool")
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise ValueError(f"Operand must be a decimal string or int, got {type(value).__name__}")
    return value


# Signed integer of any size as decimal string
DecimalString = Annotated[
    str,
    BeforeValidator(validate_operand),
    Field(description="Signed integer as decimal string"),
]


class EvaluateRequest(BaseModel):
    """A single operation on one or two operands."""

    op: Operation = Field(description="Operation name, e.g. 'add' or 'shl'")
    lhs: DecimalString = Field(description="Left operand")
    rhs: DecimalString | None = Field(
        default=None,
        description="Right operand. Required for binary operations.",
    )


class EvaluateResponse(BaseModel):
    """Result of an evaluated operation."""

    op: Operation
    result: str = Field(description="Result as decimal string")
    remainder: str | None = Field(
        default=None,
        description="Remainder, only set for 'divmod'.",
    )
