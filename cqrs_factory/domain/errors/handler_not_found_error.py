"""Reserved dispatch signal: no handler registered for an operation type.

Raised by the operation buses. The builder recognizes it and classifies it
as ``HANDLER_NOT_FOUND`` instead of an internal handler error.
"""


class HandlerNotFoundError(LookupError):
    """No handler is registered for the dispatched operation type.

    Attributes:
        operation_type: The operation class that had no handler.
    """

    kind_label = "Operation"

    def __init__(self, operation_type: type) -> None:
        self.operation_type = operation_type
        super().__init__(
            f'No handler found for {self.kind_label.lower()} "{operation_type.__name__}"'
        )


class CommandHandlerNotFoundError(HandlerNotFoundError):
    """No handler is registered for the dispatched command."""

    kind_label = "Command"


class QueryHandlerNotFoundError(HandlerNotFoundError):
    """No handler is registered for the dispatched query."""

    kind_label = "Query"
