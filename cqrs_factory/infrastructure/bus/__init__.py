"""Operation dispatch buses."""

from cqrs_factory.infrastructure.bus.in_memory_operation_bus import (
    CommandBus,
    InMemoryOperationBus,
    QueryBus,
)

__all__ = ["CommandBus", "InMemoryOperationBus", "QueryBus"]
