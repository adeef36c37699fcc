"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes

The core module has NO dependencies on other package layers.
"""

from casbin_arango_adapter.core.enums import ErrorCode
from casbin_arango_adapter.core.errors import DomainError
from casbin_arango_adapter.core.result import Failure, Result, Success, map_value

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "map_value",
]
