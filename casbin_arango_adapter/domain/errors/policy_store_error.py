"""Policy storage error types.

Returned (never raised) by the policy store when a query against the
database fails: connection loss, malformed query, server-side error.

Usage:
    from casbin_arango_adapter.domain.errors import PolicyStoreError
    from casbin_arango_adapter.core.enums import ErrorCode
    from casbin_arango_adapter.core.result import Failure

    return Failure(error=PolicyStoreError(
        code=ErrorCode.POLICY_LOAD_FAILED,
        message="Failed to load policy: connection refused",
        operation="load_policy",
        collection="casbin",
    ))
"""

from dataclasses import dataclass

from casbin_arango_adapter.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicyStoreError(DomainError):
    """Policy storage failure.

    Attributes:
        code: ErrorCode enum (POLICY_LOAD_FAILED, POLICY_ADD_FAILED, ...).
        message: Human-readable message.
        operation: Store operation that failed (load_policy, add_policy, ...).
        collection: Collection the query ran against.
        details: Additional context (ptype, original error type).
    """

    operation: str
    collection: str
