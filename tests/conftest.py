"""
Pytest configuration and shared fixtures for linesel tests.
"""

import pytest
from loguru import logger

from linesel.config import EngineConfig, set_default_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the built-in defaults, not the caller's environment."""
    config = EngineConfig()
    set_default_config(config)
    yield config
    set_default_config(None)


@pytest.fixture
def log_messages():
    """Capture linesel log records at DEBUG level."""
    messages: list[str] = []
    logger.enable("linesel")
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG", filter="linesel")
    yield messages
    logger.remove(sink_id)
    logger.disable("linesel")
