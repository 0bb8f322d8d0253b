"""Shared fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from loguru import logger

from metahints.hints import RuntimeHints


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Capture log messages using a custom sink."""
    messages: list[str] = []

    def sink(message: Any) -> None:
        messages.append(str(message))

    handler_id = logger.add(sink, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def runtime_hints() -> RuntimeHints:
    return RuntimeHints()
