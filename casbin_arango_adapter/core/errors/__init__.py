"""Core errors package.

Usage:
    from casbin_arango_adapter.core.errors import DomainError
"""

from casbin_arango_adapter.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
