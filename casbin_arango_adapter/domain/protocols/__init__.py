"""Domain protocols (ports).

Usage:
    from casbin_arango_adapter.domain.protocols import (
        LoggerProtocol,
        PolicyStoreProtocol,
    )
"""

from casbin_arango_adapter.domain.protocols.logger_protocol import LoggerProtocol
from casbin_arango_adapter.domain.protocols.policy_store_protocol import (
    PolicyStoreProtocol,
)

__all__ = ["LoggerProtocol", "PolicyStoreProtocol"]
