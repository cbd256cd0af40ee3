"""Operation and handler descriptors.

Declaration-time metadata keyed by class identity (never by name, so two
differently-scoped classes sharing a name cannot collide).

Design Principles:
- Immutable (frozen=True) - descriptors never change after declaration
- One descriptor per class - a second registration is a programmer error
- Read-only public surface - callers get ``has``/``get``; only the
  decorators in ``cqrs_factory.application.cqrs.decorators`` write
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from cqrs_factory.domain.errors import OperationFailedError

V = TypeVar("V")


@dataclass(frozen=True, kw_only=True)
class OperationDescriptor:
    """Metadata attached to a declared command or query.

    Attributes:
        type: Declared type name (the class name).
        exception_factory: Failure class whose constructors classify errors
            for this operation.
        description: Optional human-readable description.

    Example:
        >>> OperationDescriptor(
        ...     type="RegisterUser",
        ...     exception_factory=CommandFailedError,
        ...     description="Register a new user account",
        ... )
    """

    type: str
    exception_factory: type[OperationFailedError]
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class HandlerDescriptor:
    """Metadata attached to a declared command or query handler.

    Attributes:
        operation_type: The operation class the handler handles.
    """

    operation_type: type


class DescriptorStore(Generic[V]):
    """Process-wide mapping from class identity to its descriptor.

    Populated once at declaration time, read thereafter.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[type, V] = {}

    def has(self, target: type) -> bool:
        return target in self._entries

    def get(self, target: type) -> V | None:
        return self._entries.get(target)

    def _register(self, target: type, descriptor: V) -> None:
        if target in self._entries:
            raise ValueError(
                f"{target.__qualname__} is already registered in {self.name} descriptors"
            )
        self._entries[target] = descriptor

    def __contains__(self, target: object) -> bool:
        return target in self._entries

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DescriptorStore({self.name!r}, entries={len(self._entries)})"


COMMAND_DESCRIPTORS: DescriptorStore[OperationDescriptor] = DescriptorStore("command")
QUERY_DESCRIPTORS: DescriptorStore[OperationDescriptor] = DescriptorStore("query")
COMMAND_HANDLERS: DescriptorStore[HandlerDescriptor] = DescriptorStore("command-handler")
QUERY_HANDLERS: DescriptorStore[HandlerDescriptor] = DescriptorStore("query-handler")
