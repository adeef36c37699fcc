"""ArangoDB persistence: connection management, AQL builders, policy store.

Usage:
    from casbin_arango_adapter.infrastructure.persistence import (
        ArangoDatabase,
        ArangoPolicyStore,
    )
"""

from casbin_arango_adapter.infrastructure.persistence.arango_database import (
    ArangoDatabase,
)
from casbin_arango_adapter.infrastructure.persistence.arango_policy_store import (
    DEFAULT_COLLECTION,
    ArangoPolicyStore,
)

__all__ = ["ArangoDatabase", "ArangoPolicyStore", "DEFAULT_COLLECTION"]
