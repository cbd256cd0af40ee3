"""Logging adapters."""

from cqrs_factory.infrastructure.logging.console_adapter import ConsoleAdapter
from cqrs_factory.infrastructure.logging.operation_logger import (
    CommandLogger,
    OperationLogEntry,
    OperationLogger,
    QueryLogger,
)

__all__ = [
    "CommandLogger",
    "ConsoleAdapter",
    "OperationLogEntry",
    "OperationLogger",
    "QueryLogger",
]
