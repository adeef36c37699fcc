"""Infrastructure dependency factories.

Process-scoped singletons for core infrastructure:
- Logging (structlog console adapter)
- ArangoDB connection (python-arango-async)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from casbin_arango_adapter.core.config import settings

if TYPE_CHECKING:
    from casbin_arango_adapter.domain.protocols.logger_protocol import LoggerProtocol
    from casbin_arango_adapter.infrastructure.persistence.arango_database import (
        ArangoDatabase,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from casbin_arango_adapter.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_arango_database() -> "ArangoDatabase":
    """Return the ArangoDB connection manager singleton (not yet connected).

    Callers await ``connect()`` (create_adapter() does) before running
    queries, and ``close()`` on shutdown.

    Returns:
        ArangoDatabase configured from settings.
    """
    from casbin_arango_adapter.infrastructure.persistence.arango_database import (
        ArangoDatabase,
    )

    return ArangoDatabase(
        url=settings.arango_url,
        database=settings.arango_database,
        username=settings.arango_username,
        password=settings.arango_password,
    )
