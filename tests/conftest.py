"""Shared fixtures for syntaxparts tests."""

from typing import List

import pytest
from loguru import logger

from syntaxparts import SyntaxConfig
from syntaxparts.logger import setup_logger


@pytest.fixture
def custom_config() -> SyntaxConfig:
    """A config with non-default labels and padding."""
    return SyntaxConfig(
        version="0.1",
        number_placeholder="<n>",
        fixed_length_number_placeholder="<{length} digits>",
        pad_character="9",
    )


@pytest.fixture
def log_messages():
    """Capture syntaxparts log records at TRACE level."""
    messages: List[str] = []
    handler_id = setup_logger(log_level="TRACE", sink=messages.append)

    yield messages

    logger.remove(handler_id)
    logger.disable("syntaxparts")
