"""Command and query factories.

A factory hands out one fresh, fully wired builder per call:

    factory = get_command_factory()
    builder = factory.create(RegisterUser)
    user_id = await builder.name("John").age(30).execute()

Requesting a builder for a class that was not declared with ``@command``
(or ``@query``) is a programmer error and raises ``TypeError`` right away.
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel

from cqrs_factory.application.cqrs.builder import OperationBuilderBase
from cqrs_factory.application.cqrs.descriptors import (
    COMMAND_DESCRIPTORS,
    QUERY_DESCRIPTORS,
    DescriptorStore,
    OperationDescriptor,
)
from cqrs_factory.application.cqrs.proxy import OperationBuilder
from cqrs_factory.domain.protocols import OperationBuilderLogger, OperationExecutor

O = TypeVar("O", bound=BaseModel)


class OperationFactory(ABC):
    """Creates builders wired to one executor and one logger."""

    def __init__(
        self,
        logger: OperationBuilderLogger | None,
        executor: OperationExecutor[Any, Any],
    ) -> None:
        """Initialize factory with its collaborators.

        Args:
            logger: Receives one event per execution; None disables logging.
            executor: Dispatches built operations (usually an operation bus).
        """
        self._logger = logger
        self._executor = executor

    @property
    @abstractmethod
    def descriptors(self) -> DescriptorStore[OperationDescriptor]:
        """Descriptor store of the operation kind this factory serves."""

    def create(self, operation_type: type[O]) -> OperationBuilder[O, Any]:
        """Create a builder for a declared operation type.

        Args:
            operation_type: A model decorated with the factory's operation
                decorator.

        Returns:
            Chainable builder starting from the type's defaults.

        Raises:
            TypeError: The type was never declared.
        """
        descriptor = self.descriptors.get(operation_type)
        if descriptor is None:
            raise TypeError(
                f"Missing exception factory for {operation_type!r}. Did you forget "
                f"to decorate the operation with @{self.descriptors.name}?"
            )

        builder: OperationBuilderBase[O, Any] = OperationBuilderBase(operation_type)
        builder.set_executor(self._executor)
        builder.set_exception_factory(descriptor.exception_factory)
        if self._logger is not None:
            builder.set_logger(self._logger)

        return OperationBuilder(builder)


class CommandFactory(OperationFactory):
    """Builders for commands declared with ``@command``."""

    @property
    def descriptors(self) -> DescriptorStore[OperationDescriptor]:
        return COMMAND_DESCRIPTORS


class QueryFactory(OperationFactory):
    """Builders for queries declared with ``@query``."""

    @property
    def descriptors(self) -> DescriptorStore[OperationDescriptor]:
        return QUERY_DESCRIPTORS
