"""Container module - Centralized dependency injection.

The container is organized into modules:
- infrastructure: Core services (logging)
- cqrs: Buses, execution loggers and builder factories

Usage:
    from cqrs_factory.core.container import get_command_factory
"""

from cqrs_factory.core.container.infrastructure import get_logger

from cqrs_factory.core.container.cqrs import (
    get_command_bus,
    get_command_factory,
    get_command_logger,
    get_query_bus,
    get_query_factory,
    get_query_logger,
)

__all__ = [
    "get_command_bus",
    "get_command_factory",
    "get_command_logger",
    "get_logger",
    "get_query_bus",
    "get_query_factory",
    "get_query_logger",
]
