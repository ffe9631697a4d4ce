"""
Shared test fixtures.
"""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_log_sinks():
    """Drop sinks installed by CLI runs so they never outlive a captured stream."""
    yield
    logger.remove()
