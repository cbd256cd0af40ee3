"""Domain protocols (ports) implemented by infrastructure adapters."""

from cqrs_factory.domain.protocols.logger_protocol import LoggerProtocol
from cqrs_factory.domain.protocols.operation_executor_protocol import (
    AnyExecutor,
    OperationExecutor,
    OperationHandler,
)
from cqrs_factory.domain.protocols.operation_logger_protocol import (
    OperationBuilderLogger,
)

__all__ = [
    "AnyExecutor",
    "LoggerProtocol",
    "OperationBuilderLogger",
    "OperationExecutor",
    "OperationHandler",
]
