"""Domain errors package.

Usage:
    from casbin_arango_adapter.domain.errors import PolicyStoreError
"""

from casbin_arango_adapter.domain.errors.policy_store_error import PolicyStoreError

__all__ = ["PolicyStoreError"]
