"""Command-line calculator for arbitrary-precision integers.

Usage:
    bigint 123456789123456789123456789 '*' -987654321
    bigint 100 / 3
    bigint 7 cmp 12
    bigint neg 42

    # Pick the division strategy for this run
    bigint --strategy estimate 1000000000000 / 1000
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

import structlog

from bigint.config import DEFAULT_ENGINE_CONFIG, DivisionStrategy, EngineConfig
from bigint.errors import IntegerError
from bigint.integer import Integer

logger = structlog.get_logger()

BINARY_OPERATORS: dict[str, Callable[[Integer, Integer, EngineConfig], str]] = {
    "+": lambda a, b, _config: str(a.add(b)),
    "-": lambda a, b, _config: str(a.sub(b)),
    "*": lambda a, b, _config: str(a.mul(b)),
    "x": lambda a, b, _config: str(a.mul(b)),
    "/": lambda a, b, config: str(a.div(b, config=config)),
    "cmp": lambda a, b, _config: a.compare(b).name.lower(),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigint",
        description="Exact integer arithmetic on decimal numbers of any size",
    )
    parser.add_argument(
        "expression",
        nargs="+",
        metavar="TOKEN",
        help=f"LEFT OP RIGHT (OP one of: {' '.join(BINARY_OPERATORS)}) or 'neg VALUE'",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in DivisionStrategy],
        default=None,
        help="Division strategy (default: BIGINT_DIVISION_STRATEGY or subtraction)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def configure_logging(verbose: bool) -> None:
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


def evaluate(tokens: Sequence[str], config: EngineConfig) -> str:
    """Evaluate a tokenized expression and return the rendered result.

    Raises:
        InvalidFormat: If an operand is not a decimal integer
        DivisionByZero: If dividing by zero
        ValueError: If the expression shape or operator is unknown
    """
    if len(tokens) == 2 and tokens[0] == "neg":
        return str(Integer(tokens[1]).negate())
    if len(tokens) != 3:
        raise ValueError(f"Expected 'LEFT OP RIGHT' or 'neg VALUE', got {len(tokens)} tokens")

    left, operator, right = tokens
    handler = BINARY_OPERATORS.get(operator)
    if handler is None:
        raise ValueError(f"Unknown operator {operator!r}")
    return handler(Integer(left), Integer(right), config)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = DEFAULT_ENGINE_CONFIG
    if args.strategy is not None:
        config = EngineConfig(division_strategy=DivisionStrategy(args.strategy))

    try:
        result = evaluate(args.expression, config)
    except IntegerError as e:
        logger.error("evaluation_failed", expression=" ".join(args.expression), error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        parser.error(str(e))

    logger.debug(
        "evaluated",
        expression=" ".join(args.expression),
        strategy=config.division_strategy.value,
    )
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
