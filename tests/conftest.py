"""
Shared pytest fixtures for termwave tests.
"""

import numpy as np
import pytest
from loguru import logger

from termwave.render import AsciiCharset, BlocksCharset, DotsCharset


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset loguru after each test so CLI sinks don't leak between tests."""
    yield
    logger.remove()
    logger.disable("termwave")


@pytest.fixture
def blocks():
    return BlocksCharset()


@pytest.fixture
def ascii_charset():
    return AsciiCharset()


@pytest.fixture
def dots():
    return DotsCharset()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def noisy_magnitudes(rng):
    """A loud-ish envelope with some silent columns."""
    values = rng.uniform(0.0, 1.0, size=48)
    values[::7] = 0.0
    return values
