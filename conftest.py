"""Test configuration shared by all lunchctl test suites."""

import pytest
from lunchctl_logging import logger as logger_module


@pytest.fixture(autouse=True)
def quiet_loggers():
    """Keep lunchctl loggers off the console during tests."""
    logger_module._defaults["enable_console"] = False
    for existing in logger_module._loggers.values():
        existing.configure(**logger_module._defaults)
    yield
