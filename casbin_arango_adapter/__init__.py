"""ArangoDB storage adapter for Casbin.

Usage:
    import casbin
    from casbin_arango_adapter import ArangoAdapter, ArangoDatabase

    async with ArangoDatabase("http://localhost:8529", "_system", "root", "pw") as db:
        await db.ensure_collection("casbin")
        adapter = ArangoAdapter.from_database(db.database)
        enforcer = casbin.AsyncEnforcer("rbac_model.conf", adapter)
        await enforcer.load_policy()
"""

from casbin_arango_adapter.domain.entities import CasbinRule
from casbin_arango_adapter.domain.value_objects import PolicyFilter
from casbin_arango_adapter.infrastructure.authorization import (
    ArangoAdapter,
    PolicyStorageError,
)
from casbin_arango_adapter.infrastructure.persistence import (
    ArangoDatabase,
    ArangoPolicyStore,
)

__version__ = "0.1.0"

__all__ = [
    "ArangoAdapter",
    "ArangoDatabase",
    "ArangoPolicyStore",
    "CasbinRule",
    "PolicyFilter",
    "PolicyStorageError",
]
