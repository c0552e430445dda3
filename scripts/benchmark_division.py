#!/usr/bin/env python3
"""Time long division under each quotient-digit strategy.

Repeated subtraction costs up to nine magnitude subtractions per quotient
digit; the estimate strategy usually needs one multiply and at most a
couple of corrections. This script measures the difference on random
operands and checks that both strategies agree.

Usage:
    python scripts/benchmark_division.py
    python scripts/benchmark_division.py --dividend-digits 2000 --divisor-digits 50 --runs 5
"""

import argparse
import random
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bigint import DivisionStrategy, EngineConfig, Integer  # noqa: E402


def random_digits(rng: random.Random, length: int) -> str:
    """Random decimal text of exactly `length` digits (no leading zero)."""
    first = str(rng.randint(1, 9))
    return first + "".join(str(rng.randint(0, 9)) for _ in range(length - 1))


def time_division(
    dividend: Integer, divisor: Integer, strategy: DivisionStrategy
) -> tuple[float, Integer]:
    """Return (elapsed seconds, quotient) for one division."""
    config = EngineConfig(division_strategy=strategy)
    start = time.perf_counter()
    quotient = dividend.div(divisor, config=config)
    elapsed = time.perf_counter() - start
    return elapsed, quotient


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark division strategies")
    parser.add_argument(
        "--dividend-digits",
        type=int,
        default=1000,
        help="Digits in each dividend (default: 1000)",
    )
    parser.add_argument(
        "--divisor-digits",
        type=int,
        default=20,
        help="Digits in each divisor (default: 20)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=3,
        help="Number of random operand pairs (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed (default: 0)",
    )
    args = parser.parse_args()

    rng = random.Random(args.seed)
    totals = {strategy: 0.0 for strategy in DivisionStrategy}

    print(f"Dividend digits: {args.dividend_digits}")
    print(f"Divisor digits:  {args.divisor_digits}")
    print(f"Runs:            {args.runs}")
    print()

    for run in range(args.runs):
        dividend = Integer(random_digits(rng, args.dividend_digits))
        divisor = Integer(random_digits(rng, args.divisor_digits))

        quotients = {}
        for strategy in DivisionStrategy:
            elapsed, quotient = time_division(dividend, divisor, strategy)
            totals[strategy] += elapsed
            quotients[strategy] = quotient
            print(f"  run {run + 1} {strategy.value:<12} {elapsed * 1000:>10.1f}ms")

        if len(set(quotients.values())) != 1:
            print(f"Error: strategies disagree on run {run + 1}")
            return 1

    print()
    for strategy, total in totals.items():
        print(f"{strategy.value:<12} avg {total / args.runs * 1000:>10.1f}ms")

    baseline = totals[DivisionStrategy.SUBTRACTION]
    estimate = totals[DivisionStrategy.ESTIMATE]
    if estimate > 0:
        print(f"\nSpeedup (subtraction / estimate): {baseline / estimate:.2f}x")
    return 0


if __name__ == "__main__":
    sys.exit(main())
