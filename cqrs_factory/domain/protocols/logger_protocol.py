"""LoggerProtocol definition for structured logging.

Backend-agnostic port for the log sink. Implementations MUST keep logs
structured (message + key-value context).

Log Levels:
    - DEBUG: Detailed diagnostic info
    - INFO: Normal operational events (successful executions)
    - WARNING: Degraded behavior
    - ERROR: Operation failed, system continues (failed executions)
    - CRITICAL: System-wide failure

Usage:
    from cqrs_factory.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("Command 'RegisterUser' succeeded in 1.2ms.", kind="command")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
