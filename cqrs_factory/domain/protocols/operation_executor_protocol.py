"""Ports for dispatching operations to their handlers.

Architecture:
    - Protocols (structural typing, NOT ABC inheritance)
    - Implemented by CommandBus / QueryBus in
      cqrs_factory/infrastructure/bus/in_memory_operation_bus.py
    - Any object with an async ``execute`` works as an executor, so a
      caller may plug in its own dispatcher
"""

from typing import Any, Protocol, TypeVar

O_contra = TypeVar("O_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class OperationExecutor(Protocol[O_contra, R_co]):
    """Carries out a validated operation.

    Fails by raising. ``HandlerNotFoundError`` is reserved for "no handler
    registered for this operation type"; anything else is a handler failure.
    """

    async def execute(self, operation: O_contra) -> R_co:
        """Dispatch the operation and return the handler's result."""
        ...


class OperationHandler(Protocol[O_contra, R_co]):
    """Handles one operation type.

    May return a plain value or a ``Result`` (Success/Failure).
    """

    async def handle(self, operation: O_contra) -> R_co:
        """Carry out the operation."""
        ...


# Convenience alias for untyped wiring
AnyExecutor = OperationExecutor[Any, Any]
