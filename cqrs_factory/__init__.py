"""cqrs-factory: fluent builders for validated commands and queries.

Declare an operation as a pydantic model, get a builder for it, chain
field setters and execute:

    from pydantic import BaseModel, Field
    from cqrs_factory import command, command_handler, get_command_bus, get_command_factory

    @command()
    class RegisterUser(BaseModel):
        name: str = Field(min_length=1)
        age: int

    @command_handler(RegisterUser)
    class RegisterUserHandler:
        async def handle(self, cmd: RegisterUser) -> str:
            return f"user:{cmd.name}"

    get_command_bus().register_handlers(RegisterUserHandler())
    user = await get_command_factory().create(RegisterUser).name("John").age(30).execute()

Failures surface as ``CommandFailedError`` / ``QueryFailedError`` with a
``code`` of INVALID_COMMAND/INVALID_QUERY, HANDLER_NOT_FOUND or
INTERNAL_HANDLER_ERROR.
"""

from cqrs_factory.application.cqrs import (
    CommandFactory,
    OperationBuilder,
    OperationBuilderBase,
    OperationDescriptor,
    OperationFactory,
    QueryFactory,
    command,
    command_handler,
    query,
    query_handler,
)
from cqrs_factory.core.container import (
    get_command_bus,
    get_command_factory,
    get_query_bus,
    get_query_factory,
)
from cqrs_factory.core.enums import OperationKind
from cqrs_factory.core.result import Failure, Result, Success
from cqrs_factory.domain.errors import (
    CommandFailedError,
    CommandHandlerNotFoundError,
    ConstraintViolation,
    HandlerNotFoundError,
    OperationErrorCode,
    OperationFailedError,
    QueryFailedError,
    QueryHandlerNotFoundError,
)
from cqrs_factory.infrastructure.bus import CommandBus, QueryBus
from cqrs_factory.infrastructure.logging import CommandLogger, QueryLogger

__all__ = [
    "CommandBus",
    "CommandFactory",
    "CommandFailedError",
    "CommandHandlerNotFoundError",
    "CommandLogger",
    "ConstraintViolation",
    "Failure",
    "HandlerNotFoundError",
    "OperationBuilder",
    "OperationBuilderBase",
    "OperationDescriptor",
    "OperationErrorCode",
    "OperationFactory",
    "OperationFailedError",
    "OperationKind",
    "QueryBus",
    "QueryFactory",
    "QueryFailedError",
    "QueryHandlerNotFoundError",
    "QueryLogger",
    "Result",
    "Success",
    "command",
    "command_handler",
    "get_command_bus",
    "get_command_factory",
    "get_query_bus",
    "get_query_factory",
    "query",
    "query_handler",
]
