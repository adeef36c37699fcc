"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Policy storage errors (POLICY_*_FAILED), one per storage operation
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Policy storage errors
    POLICY_LOAD_FAILED = "policy_load_failed"
    POLICY_SAVE_FAILED = "policy_save_failed"
    POLICY_CLEAR_FAILED = "policy_clear_failed"
    POLICY_ADD_FAILED = "policy_add_failed"
    POLICY_REMOVE_FAILED = "policy_remove_failed"
