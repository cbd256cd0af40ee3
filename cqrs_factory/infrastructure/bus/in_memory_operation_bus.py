"""In-memory command and query buses.

Dispatches each operation to the single handler registered for its exact
class. Suitable for single-process use.

Architecture:
    - Implements OperationExecutor (hexagonal adapter pattern)
    - Dictionary-based handler registry (operation type -> handler)
    - Fail-closed: handler errors propagate to the caller untouched; the
      operation builder classifies them
    - Missing handler raises the bus's HandlerNotFoundError subclass

Usage:
    >>> bus = CommandBus()
    >>> bus.register_handlers(RegisterUserHandler(users))  # @command_handler(RegisterUser)
    >>> user_id = await bus.execute(RegisterUser(name="John", age=30))
"""

from typing import Any, ClassVar

from cqrs_factory.application.cqrs.descriptors import (
    COMMAND_HANDLERS,
    QUERY_HANDLERS,
    DescriptorStore,
    HandlerDescriptor,
)
from cqrs_factory.domain.errors import (
    CommandHandlerNotFoundError,
    HandlerNotFoundError,
    QueryHandlerNotFoundError,
)
from cqrs_factory.domain.protocols import OperationHandler


class InMemoryOperationBus:
    """Routes operations to handlers by operation class.

    Thread Safety:
        - NOT thread-safe (single-threaded async design)
        - Register handlers at startup, dispatch afterwards

    Attributes:
        _handlers: Operation class -> handler instance. Exact type match
            only (no inheritance matching).
    """

    handler_descriptors: ClassVar[DescriptorStore[HandlerDescriptor]]
    not_found_error: ClassVar[type[HandlerNotFoundError]] = HandlerNotFoundError

    def __init__(self) -> None:
        self._handlers: dict[type, OperationHandler[Any, Any]] = {}

    def register(self, operation_type: type, handler: OperationHandler[Any, Any]) -> None:
        """Register the handler for one operation type.

        Raises:
            ValueError: A handler is already registered for the type.
        """
        if operation_type in self._handlers:
            raise ValueError(
                f"Handler for {operation_type.__name__} is already registered: "
                f"{type(self._handlers[operation_type]).__name__}"
            )
        self._handlers[operation_type] = handler

    def register_handlers(self, *handlers: OperationHandler[Any, Any]) -> None:
        """Register handler instances declared with the bus's handler decorator.

        Raises:
            TypeError: A handler's class was never declared as a handler.
        """
        for handler in handlers:
            descriptor = self.handler_descriptors.get(type(handler))
            if descriptor is None:
                raise TypeError(
                    f"{type(handler).__name__} is not a declared "
                    f"{self.handler_descriptors.name}"
                )
            self.register(descriptor.operation_type, handler)

    def has_handler(self, operation_type: type) -> bool:
        return operation_type in self._handlers

    async def execute(self, operation: Any) -> Any:
        """Dispatch an operation to its handler.

        Returns:
            Whatever the handler returns (plain value or Result).

        Raises:
            HandlerNotFoundError: No handler registered for the type.
        """
        handler = self._handlers.get(type(operation))
        if handler is None:
            raise self.not_found_error(type(operation))
        return await handler.handle(operation)


class CommandBus(InMemoryOperationBus):
    """Bus for handlers declared with ``@command_handler``."""

    handler_descriptors = COMMAND_HANDLERS
    not_found_error = CommandHandlerNotFoundError


class QueryBus(InMemoryOperationBus):
    """Bus for handlers declared with ``@query_handler``."""

    handler_descriptors = QUERY_HANDLERS
    not_found_error = QueryHandlerNotFoundError
