"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging used by the adapter and the policy store.
Implementations MUST keep logs structured (message + key-value context) and
MUST NOT log credentials: ArangoDB passwords never reach a log call.

Log Levels (standard 5-level hierarchy):
    - DEBUG: Per-rule detail (rejections, skipped types)
    - INFO: Completed storage operations (loaded, saved, cleared)
    - WARNING: Unexpected but recoverable state (collection had to be created)
    - ERROR: Storage operation failed
    - CRITICAL: Unrecoverable failure

Usage:
    from casbin_arango_adapter.core.container import get_logger

    logger = get_logger()
    logger.info("policy_loaded", collection="casbin", count=42)

    store_logger = logger.bind(collection="casbin")
    store_logger.info("policy_cleared")  # collection auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
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
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for unrecoverable failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind() - return logger with bound context."""
        ...
