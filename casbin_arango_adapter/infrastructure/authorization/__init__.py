"""Authorization infrastructure package.

Casbin storage adapter backed by ArangoDB:
- arango_adapter.py: ArangoAdapter implementing Casbin's AsyncAdapter
"""

from casbin_arango_adapter.infrastructure.authorization.arango_adapter import (
    ArangoAdapter,
    PolicyStorageError,
)

__all__ = ["ArangoAdapter", "PolicyStorageError"]
