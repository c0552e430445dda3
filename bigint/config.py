"""Engine configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import structlog

from bigint.digits import (
    QuotientDigitFn,
    quotient_digit_by_estimate,
    quotient_digit_by_subtraction,
)

logger = structlog.get_logger()

# Environment variable selecting the division strategy
DIVISION_STRATEGY_ENV = "BIGINT_DIVISION_STRATEGY"


class DivisionStrategy(str, Enum):
    """How long division finds each quotient digit."""

    SUBTRACTION = "subtraction"
    ESTIMATE = "estimate"

    @property
    def quotient_digit(self) -> QuotientDigitFn:
        if self is DivisionStrategy.ESTIMATE:
            return quotient_digit_by_estimate
        return quotient_digit_by_subtraction


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the integer engine.

    Attributes:
        division_strategy: Quotient-digit rule used by long division.
            SUBTRACTION counts repeated subtractions; ESTIMATE guesses the
            digit from leading digits and corrects it. Both produce the
            same quotient.
    """

    division_strategy: DivisionStrategy = DivisionStrategy.SUBTRACTION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a config from environment variables.

        - BIGINT_DIVISION_STRATEGY: "subtraction" (default) or "estimate"

        Unknown values are logged and replaced by the default.
        """
        env = os.environ if environ is None else environ
        raw = env.get(DIVISION_STRATEGY_ENV)
        if raw is None:
            return cls()

        try:
            strategy = DivisionStrategy(raw.strip().lower())
        except ValueError:
            logger.warning(
                "unknown_division_strategy",
                value=raw,
                valid_strategies=[s.value for s in DivisionStrategy],
                default=cls.division_strategy.value,
            )
            return cls()
        return cls(division_strategy=strategy)


# Default configuration instance
DEFAULT_ENGINE_CONFIG = EngineConfig.from_env()
