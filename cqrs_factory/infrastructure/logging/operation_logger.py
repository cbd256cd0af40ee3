"""Execution logger for commands and queries.

Turns builder outcomes into structured log records. Each record has a
human-readable message plus the same data as typed fields:

    success: kind, name, status="success", duration
    failure: kind, name, status="error", duration, error_code, error_message

Successes are logged at INFO, failures at ERROR. Stateless beyond the
injected sink and the kind chosen at construction.
"""

from dataclasses import dataclass, field
from typing import Any

from cqrs_factory.core.config import settings
from cqrs_factory.core.enums import OperationKind
from cqrs_factory.domain.errors import OperationFailedError, operation_type_name
from cqrs_factory.domain.protocols import LoggerProtocol


@dataclass(frozen=True, kw_only=True)
class OperationLogEntry:
    """One rendered log record.

    Attributes:
        message: Human-readable summary.
        context: Structured payload for machine consumption.
    """

    message: str
    context: dict[str, Any] = field(default_factory=dict)


class OperationLogger:
    """Logs command or query execution outcomes.

    Implements ``OperationBuilderLogger`` structurally.

    Attributes:
        logger: The log sink.
        kind: Operation kind tagged on every record.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        kind: OperationKind,
        *,
        precision: int | None = None,
    ) -> None:
        """Initialize the execution logger.

        Args:
            logger: Structured log sink.
            kind: Fixed kind discriminant for every record.
            precision: Decimal places kept for durations; defaults to
                ``settings.duration_precision``.
        """
        self.logger = logger
        self.kind = kind
        self._precision = settings.duration_precision if precision is None else precision

    def create_log_entry(self, message: str, **payload: Any) -> OperationLogEntry:
        """Prefix the message with the kind label and tag the payload."""
        return OperationLogEntry(
            message=f"{self.kind.label} {message}",
            context={"kind": self.kind.value, **payload},
        )

    def log_success(self, operation_type: str, duration: float) -> None:
        duration = round(duration, self._precision)
        entry = self.create_log_entry(
            f"'{operation_type}' succeeded in {duration}ms.",
            name=operation_type,
            status="success",
            duration=duration,
        )
        self.logger.info(entry.message, **entry.context)

    def log_failure(self, exception: OperationFailedError, duration: float) -> None:
        duration = round(duration, self._precision)
        name = operation_type_name(exception.operation)
        entry = self.create_log_entry(
            f"'{name}' failed after {duration}ms with code '{exception.code}' "
            f"and a reason: '{exception}'.",
            name=name,
            status="error",
            duration=duration,
            error_code=exception.code,
            error_message=str(exception),
        )
        self.logger.error(entry.message, **entry.context)


class CommandLogger(OperationLogger):
    """Execution logger for commands."""

    def __init__(self, logger: LoggerProtocol, *, precision: int | None = None) -> None:
        super().__init__(logger, OperationKind.COMMAND, precision=precision)


class QueryLogger(OperationLogger):
    """Execution logger for queries."""

    def __init__(self, logger: LoggerProtocol, *, precision: int | None = None) -> None:
        super().__init__(logger, OperationKind.QUERY, precision=precision)
