"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigint import DivisionStrategy, EngineConfig, Integer


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test triggers (e.g. via the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture(params=list(DivisionStrategy), ids=lambda s: s.value)
def division_config(request: pytest.FixtureRequest) -> EngineConfig:
    """An EngineConfig for each division strategy."""
    return EngineConfig(division_strategy=request.param)


@pytest.fixture
def big_positive() -> Integer:
    """A value well beyond 64-bit range."""
    return Integer("123456789123456789123456789")


@pytest.fixture
def small_negative() -> Integer:
    return Integer("-987654321")
