"""Container module - centralized dependency construction.

Re-exports all factory functions from submodules:

    from casbin_arango_adapter.core.container import get_logger, init_enforcer

- infrastructure: logging and the ArangoDB connection
- authorization: Casbin adapter and enforcer
"""

from casbin_arango_adapter.core.container.authorization import (
    create_adapter,
    get_enforcer,
    init_enforcer,
    shutdown_enforcer,
)
from casbin_arango_adapter.core.container.infrastructure import (
    get_arango_database,
    get_logger,
)

__all__ = [
    "create_adapter",
    "get_arango_database",
    "get_enforcer",
    "get_logger",
    "init_enforcer",
    "shutdown_enforcer",
]
