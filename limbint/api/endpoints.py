"""API endpoints for the evaluation service."""

import asyncio

import structlog
from fastapi import APIRouter, Depends

from limbint.api.models import EvaluateRequest, EvaluateResponse
from limbint.bigint import BigInt
from limbint.config import DEFAULT_CONFIG, ServiceConfig
from limbint.errors import InvalidOperand
from limbint.operations import Operation, evaluate

logger = structlog.get_logger()

router = APIRouter()


def get_config() -> ServiceConfig:
    """Dependency provider for the service configuration.

    Every limit the service enforces comes from here. Override this in tests
    to inject other limits:
        app.dependency_overrides[get_config] = lambda: ServiceConfig(max_shift=8)

    Returns:
        The configuration to use for this request.
    """
    return DEFAULT_CONFIG


def _parse_operand(name: str, value: str, config: ServiceConfig) -> BigInt:
    """Check an operand against the digit limit, then parse it.

    Raises:
        InvalidOperand: If the operand is longer than config.max_digits
        InvalidFormat: If the operand is not a decimal integer
    """
    if len(value) > config.max_digits:
        raise InvalidOperand(
            f"Operand '{name}' has {len(value)} characters, limit is {config.max_digits}"
        )
    return BigInt(value)


def _compute(
    op: Operation, lhs: BigInt, rhs: BigInt | None, max_shift: int
) -> tuple[BigInt, BigInt | None]:
    """Run evaluate() in a worker thread, off the event loop."""
    return evaluate(op, lhs, rhs, max_shift=max_shift)


@router.post("/evaluate", response_model_exclude_none=True)
async def evaluate_operation(
    request: EvaluateRequest,
    config: ServiceConfig = Depends(get_config),
) -> EvaluateResponse:
    """Evaluate one BigInt operation.

    Args:
        request: Operation name and decimal operands
        config: Injected service configuration (via FastAPI Depends)

    Returns:
        EvaluateResponse with the decimal result, plus the remainder for
        'divmod'. Uses `response_model_exclude_none=True` to omit the
        remainder for every other operation.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Operand too long, malformed, missing or superfluous rhs, shift
          out of range: 422 (InvalidOperand / InvalidFormat handlers)
        - Division or modulo by zero: 400 (DivisionByZero handler)
    """
    logger.info(
        "evaluate_request",
        op=request.op.value,
        lhs_digits=len(request.lhs),
        rhs_digits=len(request.rhs) if request.rhs is not None else None,
    )

    lhs = _parse_operand("lhs", request.lhs, config)
    rhs = _parse_operand("rhs", request.rhs, config) if request.rhs is not None else None

    # Schoolbook multiply and long division are CPU-bound; keep them off the loop
    loop = asyncio.get_running_loop()
    result, remainder = await loop.run_in_executor(
        None, _compute, request.op, lhs, rhs, config.max_shift
    )

    response = EvaluateResponse(
        op=request.op,
        result=result.to_string(),
        remainder=remainder.to_string() if remainder is not None else None,
    )

    logger.info(
        "evaluate_result",
        op=request.op.value,
        result_digits=len(response.result),
    )

    return response
