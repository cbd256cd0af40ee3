"""Port through which the operation builder reports execution outcomes."""

from typing import Protocol

from cqrs_factory.domain.errors import OperationFailedError


class OperationBuilderLogger(Protocol):
    """Receives exactly one event per execution attempt."""

    def log_success(self, operation_type: str, duration: float) -> None:
        """Record a successful execution.

        Args:
            operation_type: Declared type name of the operation.
            duration: Elapsed milliseconds, never negative.
        """
        ...

    def log_failure(self, exception: OperationFailedError, duration: float) -> None:
        """Record a failed execution with its classified exception."""
        ...
