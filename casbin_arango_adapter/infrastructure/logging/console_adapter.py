"""Structured stdout logging for the policy adapter.

Wraps structlog behind LoggerProtocol:
- development: colored key=value lines for a terminal
- testing/ci/production: one JSON object per line

Every event carries ``logger="casbin_arango_adapter"`` so adapter output can
be told apart from the host application's logs.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

LOGGER_NAME = "casbin_arango_adapter"


def _error_fields(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    """Flatten an exception into error_type/error_message context keys."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """LoggerProtocol implementation writing structlog events to a stream.

    Args:
        use_json: Render JSON lines instead of the console format.
        level: Minimum level name; unknown names mean INFO.
        stream: Output stream, stdout when omitted.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: IO[str] | None = None,
    ) -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                getattr(logging, level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger().bind(logger=LOGGER_NAME)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message: Event name (e.g. ``policy_query_failed``).
            error: Exception to report as error_type/error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_error_fields(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event; ``error`` is flattened like in error()."""
        self._logger.critical(message, **_error_fields(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``.

        The structlog configuration is shared, not re-applied.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
