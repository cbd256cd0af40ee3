"""Declaration decorators for operations and their handlers.

Usage:
    @command(description="Register a new user account")
    class RegisterUser(BaseModel):
        email: str = Field(min_length=3)
        name: str

    @command_handler(RegisterUser)
    class RegisterUserHandler:
        async def handle(self, cmd: RegisterUser) -> UUID: ...

    @query
    class GetUser(BaseModel):
        user_id: UUID
"""

from collections.abc import Callable
from typing import TypeVar, overload

from pydantic import BaseModel

from cqrs_factory.application.cqrs.descriptors import (
    COMMAND_DESCRIPTORS,
    COMMAND_HANDLERS,
    QUERY_DESCRIPTORS,
    QUERY_HANDLERS,
    DescriptorStore,
    HandlerDescriptor,
    OperationDescriptor,
)
from cqrs_factory.domain.errors import (
    CommandFailedError,
    OperationFailedError,
    QueryFailedError,
)

T = TypeVar("T", bound=type)
M = TypeVar("M", bound=type[BaseModel])


class OperationDecorator:
    """Declares pydantic models as operations of one kind.

    Usable bare (``@command``) or called (``@command(throws=..., description=...)``).

    Attributes:
        metadata: Descriptor store written by this decorator.
        default_exception: Failure class used when ``throws`` is omitted.
    """

    def __init__(
        self,
        metadata: DescriptorStore[OperationDescriptor],
        default_exception: type[OperationFailedError],
    ) -> None:
        self.metadata = metadata
        self.default_exception = default_exception

    @overload
    def __call__(self, target: M, /) -> M: ...

    @overload
    def __call__(
        self,
        target: None = None,
        /,
        *,
        throws: type[OperationFailedError] | None = None,
        description: str | None = None,
    ) -> Callable[[M], M]: ...

    def __call__(
        self,
        target: M | None = None,
        /,
        *,
        throws: type[OperationFailedError] | None = None,
        description: str | None = None,
    ) -> M | Callable[[M], M]:
        exception_factory = throws or self.default_exception
        if not (
            isinstance(exception_factory, type)
            and issubclass(exception_factory, self.default_exception)
        ):
            raise TypeError(
                f"throws= must be a subclass of {self.default_exception.__name__}, "
                f"got {exception_factory!r}"
            )

        def decorate(cls: M) -> M:
            if not (isinstance(cls, type) and issubclass(cls, BaseModel)):
                raise TypeError(
                    f"@{self.metadata.name} can only decorate pydantic models, got {cls!r}"
                )
            self.metadata._register(
                cls,
                OperationDescriptor(
                    type=cls.__name__,
                    exception_factory=exception_factory,
                    description=description,
                ),
            )
            return cls

        if target is not None:
            return decorate(target)
        return decorate


class HandlerDecorator:
    """Declares a class as the handler of one operation type."""

    def __init__(
        self,
        metadata: DescriptorStore[HandlerDescriptor],
        operations: DescriptorStore[OperationDescriptor],
    ) -> None:
        self.metadata = metadata
        self.operations = operations

    def __call__(self, operation_type: type) -> Callable[[T], T]:
        if not self.operations.has(operation_type):
            raise TypeError(
                f"{operation_type!r} is not a declared {self.operations.name}. "
                f"Did you forget to decorate it with @{self.operations.name}?"
            )

        def decorate(cls: T) -> T:
            self.metadata._register(cls, HandlerDescriptor(operation_type=operation_type))
            return cls

        return decorate


command = OperationDecorator(COMMAND_DESCRIPTORS, CommandFailedError)
query = OperationDecorator(QUERY_DESCRIPTORS, QueryFailedError)
command_handler = HandlerDecorator(COMMAND_HANDLERS, COMMAND_DESCRIPTORS)
query_handler = HandlerDecorator(QUERY_HANDLERS, QUERY_DESCRIPTORS)
