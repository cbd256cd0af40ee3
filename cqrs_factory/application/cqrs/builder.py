"""Operation builder: accumulate, validate, dispatch and classify.

Flow of ``execute()``:
1. Check setup (executor, exception factory) - fatal, never classified
2. Build: materialize ``curr_state`` and validate it
3. Dispatch the instance to the executor (the only await on the happy path)
4. Success: log name + duration, return the result
5. Failure: classify into the taxonomy, log, re-raise

A builder is mutable, single-owner state: use one per logical
operation-construction session.
"""

import copy
import time
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from cqrs_factory.application.cqrs.validation import materialize, snapshot_defaults
from cqrs_factory.core.result import Failure, Success
from cqrs_factory.domain.errors import (
    HandlerNotFoundError,
    OperationFailedError,
    operation_type_name,
)
from cqrs_factory.domain.protocols import OperationBuilderLogger, OperationExecutor

O = TypeVar("O", bound=BaseModel)
R = TypeVar("R")


class OperationBuilderBase(Generic[O, R]):
    """Stateful field accumulator for one operation type.

    Attributes:
        operation_type: Declared operation model being built.

    Example:
        >>> builder = OperationBuilderBase(RegisterUser)
        >>> builder.set_executor(command_bus).set_exception_factory(CommandFailedError)
        >>> builder.set("name", "John").set("age", 30)
        >>> user_id = await builder.execute()
    """

    def __init__(self, operation_type: type[O]) -> None:
        """Capture the type's defaults and start from them.

        Args:
            operation_type: Declared operation model.
        """
        self.operation_type = operation_type
        self._init_state: dict[str, Any] = snapshot_defaults(operation_type)
        self._curr_state: dict[str, Any] = {}
        self._executor: OperationExecutor[O, R] | None = None
        self._logger: OperationBuilderLogger | None = None
        self._exception_factory: type[OperationFailedError] | None = None

        self.clear()

    def set_exception_factory(
        self, exception_factory: type[OperationFailedError]
    ) -> "OperationBuilderBase[O, R]":
        self._exception_factory = exception_factory
        return self

    def set_executor(self, executor: OperationExecutor[O, R]) -> "OperationBuilderBase[O, R]":
        self._executor = executor
        return self

    def set_logger(self, logger: OperationBuilderLogger) -> "OperationBuilderBase[O, R]":
        self._logger = logger
        return self

    def clear(self) -> "OperationBuilderBase[O, R]":
        """Reset to the type's defaults.

        Fields with a default get a fresh copy of it; every other field
        becomes unset.
        """
        self._curr_state = copy.deepcopy(self._init_state)
        return self

    def set(self, key: str, value: Any) -> "OperationBuilderBase[O, R]":
        """Overwrite one field. No validation happens here."""
        self._curr_state[key] = value
        return self

    def get(self, key: str) -> Any:
        """Current value of a field, or None if it was never set."""
        return self._curr_state.get(key)

    async def build(self) -> O:
        """Materialize and validate the current state.

        The returned instance reflects any coercion applied by the model;
        ``curr_state`` is left untouched.

        Returns:
            The validated operation instance.

        Raises:
            OperationFailedError: Invalid operation, carrying every violation.
            RuntimeError: No exception factory configured.
        """
        exception_factory = self._require_exception_factory()

        operation, violations = materialize(self.operation_type, self._curr_state)
        if violations:
            raise exception_factory.invalid_operation(operation, violations)

        return operation

    async def execute(self) -> R:
        """Build, dispatch and time the operation.

        Returns:
            The executor's result (``Success`` results are unwrapped).

        Raises:
            OperationFailedError: Classified failure; never retried.
            RuntimeError: No executor or exception factory configured.
        """
        executor = self._require_executor()
        exception_factory = self._require_exception_factory()

        build_started_at = time.perf_counter_ns()
        try:
            operation = await self.build()
        except OperationFailedError as exc:
            self._log_failure(exc, build_started_at)
            raise

        execution_started_at = time.perf_counter_ns()
        try:
            result = await executor.execute(operation)
        except Exception as exc:
            exception = self._map_to_exception(exc, operation, exception_factory)
            self._log_failure(exception, execution_started_at)
            if exception is exc:
                raise
            raise exception from exc

        if isinstance(result, Failure):
            exception = self._map_to_exception(result.error, operation, exception_factory)
            self._log_failure(exception, execution_started_at)
            raise exception

        if self._logger is not None:
            self._logger.log_success(
                operation_type_name(operation),
                self._compute_duration_in_ms(execution_started_at),
            )

        if isinstance(result, Success):
            return result.value
        return result

    def _require_executor(self) -> OperationExecutor[O, R]:
        if self._executor is None:
            raise RuntimeError("Operation executor is not set")
        return self._executor

    def _require_exception_factory(self) -> type[OperationFailedError]:
        if self._exception_factory is None:
            raise RuntimeError("Operation exception factory is not set")
        return self._exception_factory

    def _log_failure(self, exception: OperationFailedError, started_at: int) -> None:
        if self._logger is not None:
            self._logger.log_failure(exception, self._compute_duration_in_ms(started_at))

    @staticmethod
    def _compute_duration_in_ms(started_at: int) -> float:
        return (time.perf_counter_ns() - started_at) / 1e6

    @staticmethod
    def _map_to_exception(
        error: object,
        operation: O,
        exception_factory: type[OperationFailedError],
    ) -> OperationFailedError:
        """Classify a dispatch failure (first match wins)."""
        if isinstance(error, OperationFailedError):
            return error
        if isinstance(error, HandlerNotFoundError):
            return exception_factory.handler_not_found(operation, error)
        if not isinstance(error, BaseException):
            error = RuntimeError(str(error))
        return exception_factory.internal_handler_error(operation, error)
