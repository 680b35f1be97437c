"""Command-line calculator for BigInt operations.

Usage:
    # Binary operations take an operator symbol or name
    limbint-calc 123456789123456789 '*' 987654321987654321
    limbint-calc -- -7 mod 3

    # Unary operations take a single operand
    limbint-calc 42 neg
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from limbint.bigint import BigInt
from limbint.config import DEFAULT_CONFIG
from limbint.errors import BigIntError
from limbint.operations import evaluate, parse_operation

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Route structlog output to the console at INFO, or DEBUG when verbose."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="limbint-calc",
        description="Evaluate one arbitrary-precision integer operation",
    )
    parser.add_argument("lhs", help="Left operand as decimal string")
    parser.add_argument(
        "op",
        help="Operation name (add, sub, mul, div, mod, divmod, and, or, xor, shl, shr, "
        "cmp, neg, invert, inc, dec, abs) or symbol (+ - * / %% & | ^ << >> ~)",
    )
    parser.add_argument("rhs", nargs="?", default=None, help="Right operand as decimal string")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        op = parse_operation(args.op)
        lhs = BigInt(args.lhs)
        rhs = BigInt(args.rhs) if args.rhs is not None else None
        logger.debug("evaluating", op=op.value, lhs_digits=len(args.lhs))
        result, remainder = evaluate(op, lhs, rhs, max_shift=DEFAULT_CONFIG.max_shift)
    except BigIntError as err:
        logger.debug("evaluate_rejected", reason=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(result)
    if remainder is not None:
        print(remainder)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
