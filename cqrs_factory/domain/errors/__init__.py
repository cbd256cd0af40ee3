"""Domain errors package.

Usage:
    from cqrs_factory.domain.errors import CommandFailedError, OperationErrorCode
"""

from cqrs_factory.domain.errors.constraint_violation import ConstraintViolation
from cqrs_factory.domain.errors.handler_not_found_error import (
    CommandHandlerNotFoundError,
    HandlerNotFoundError,
    QueryHandlerNotFoundError,
)
from cqrs_factory.domain.errors.operation_failed_error import (
    COMMAND_KIND,
    OPERATION_KIND,
    QUERY_KIND,
    CommandFailedError,
    OperationErrorCode,
    OperationFailedError,
    OperationKindConfig,
    QueryFailedError,
    operation_type_name,
)

__all__ = [
    "COMMAND_KIND",
    "OPERATION_KIND",
    "QUERY_KIND",
    "CommandFailedError",
    "CommandHandlerNotFoundError",
    "ConstraintViolation",
    "HandlerNotFoundError",
    "OperationErrorCode",
    "OperationFailedError",
    "OperationKindConfig",
    "QueryFailedError",
    "QueryHandlerNotFoundError",
    "operation_type_name",
]
