"""Pytest configuration and fixtures."""

import pytest
import structlog

from limbint import BigInt
from tests.helpers import SAMPLE_VALUES


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration done by the CLI between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_values() -> list[int]:
    """Native ints around limb boundaries plus seeded random values."""
    return list(SAMPLE_VALUES)


@pytest.fixture
def sample_bigints() -> list[BigInt]:
    """BigInt counterparts of sample_values."""
    return [BigInt(v) for v in SAMPLE_VALUES]
