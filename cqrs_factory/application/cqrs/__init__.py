"""CQRS builder pipeline.

Declaration:
- ``@command`` / ``@query`` attach an ``OperationDescriptor`` to a model
- ``@command_handler`` / ``@query_handler`` attach a ``HandlerDescriptor``

Execution:
- ``CommandFactory`` / ``QueryFactory`` create ``OperationBuilder`` proxies
- ``OperationBuilderBase`` validates, dispatches, times and classifies
"""

from cqrs_factory.application.cqrs.builder import OperationBuilderBase
from cqrs_factory.application.cqrs.decorators import (
    HandlerDecorator,
    OperationDecorator,
    command,
    command_handler,
    query,
    query_handler,
)
from cqrs_factory.application.cqrs.descriptors import (
    COMMAND_DESCRIPTORS,
    COMMAND_HANDLERS,
    QUERY_DESCRIPTORS,
    QUERY_HANDLERS,
    DescriptorStore,
    HandlerDescriptor,
    OperationDescriptor,
)
from cqrs_factory.application.cqrs.factory import (
    CommandFactory,
    OperationFactory,
    QueryFactory,
)
from cqrs_factory.application.cqrs.proxy import OperationBuilder
from cqrs_factory.application.cqrs.validation import (
    materialize,
    snapshot_defaults,
    violations_from_errors,
)

__all__ = [
    "COMMAND_DESCRIPTORS",
    "COMMAND_HANDLERS",
    "QUERY_DESCRIPTORS",
    "QUERY_HANDLERS",
    "CommandFactory",
    "DescriptorStore",
    "HandlerDecorator",
    "HandlerDescriptor",
    "OperationBuilder",
    "OperationBuilderBase",
    "OperationDecorator",
    "OperationDescriptor",
    "OperationFactory",
    "QueryFactory",
    "command",
    "command_handler",
    "materialize",
    "query",
    "query_handler",
    "snapshot_defaults",
    "violations_from_errors",
]
