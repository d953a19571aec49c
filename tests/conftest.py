"""Shared fixtures for logger tests"""

import io

import pytest

from leveled_logger import Logger, LogLevel
from leveled_logger.core import color


@pytest.fixture(autouse=True)
def plain_output():
    """Disable colors so rendered output is deterministic."""
    color.set_no_color(True)
    yield
    color.reset_no_color()


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def raw_logger(buffer):
    logger = Logger(buffer, LogLevel.DEBUG, "TEST")
    logger.swap_formatter("raw")
    return logger
