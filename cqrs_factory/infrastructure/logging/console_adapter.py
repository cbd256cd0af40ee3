"""Console logging adapter.

Writes execution records to stdout through structlog. Every record is a
message plus key-value context, so the same call renders as:
- development: colored key=value lines for humans
- testing/ci/production: one JSON object per line

Satisfies LoggerProtocol structurally (PEP 544); no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _renderer(use_json: bool) -> Any:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def _error_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    """Fold an exception into the record as ``error_type``/``error_message``."""
    if error is None:
        return context
    return {
        **context,
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


class ConsoleAdapter:
    """Structured stdout sink for command and query execution records.

    Args:
        use_json (bool): JSON lines when True, colored console when False.
        level (int): Records below this level are dropped.
        name (str | None): Bound as ``logger`` on every record when given,
            so execution records can be told apart from application logs.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: int = logging.INFO,
        name: str | None = None,
    ) -> None:
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _renderer(use_json),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        logger = structlog.get_logger()
        self._logger = logger.bind(logger=name) if name is not None else logger

    def _log(self, level: str, message: str, context: dict[str, Any]) -> None:
        getattr(self._logger, level)(message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        self._log("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._log("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._log("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed execution or other error.

        Args:
            message (str): Human-readable summary.
            error (Exception | None): Adds ``error_type`` and ``error_message``.
            **context: Structured fields (kind, name, error_code, ...).
        """
        self._log("error", message, _error_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._log("critical", message, _error_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose records all carry ``context``.

        The global structlog configuration is not touched again.

        Returns:
            ConsoleAdapter: Independent adapter sharing the same output.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
