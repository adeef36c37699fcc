"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every error this package returns inside a
Result. Errors flow through the system as data, not exceptions; only the
Casbin-facing adapter turns them into a raised exception, because Casbin
expects adapters to raise.

Usage:
    from casbin_arango_adapter.core.errors import DomainError
    from casbin_arango_adapter.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from casbin_arango_adapter.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
