"""Shared pytest fixtures.

Provides:
1. A mock structured log sink (LoggerProtocol)
2. Mock command/query executors
3. Fresh container singletons per test
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cqrs_factory.core.container import cqrs, infrastructure
from cqrs_factory.domain.protocols import LoggerProtocol

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def mock_log_sink():
    """Mock LoggerProtocol sink recording every call."""
    return MagicMock(spec=LoggerProtocol)


@pytest.fixture
def mock_executor():
    """Mock executor whose ``execute`` is awaitable."""
    executor = MagicMock()
    executor.execute = AsyncMock(return_value=None)
    return executor


@pytest.fixture(autouse=True)
def clear_container_singletons():
    """Reset lru_cache singletons so tests never share buses or loggers."""
    factories = [
        infrastructure.get_logger,
        cqrs.get_command_bus,
        cqrs.get_query_bus,
        cqrs.get_command_logger,
        cqrs.get_query_logger,
        cqrs.get_command_factory,
        cqrs.get_query_factory,
    ]
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()
