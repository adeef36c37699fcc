"""PolicyStoreProtocol - storage port for Casbin rules.

Defines the storage operations the Casbin adapter needs, expressed on
CasbinRule entities instead of a concrete database. The ArangoDB
implementation lives in infrastructure/persistence/arango_policy_store.py;
tests use an in-memory implementation.

**Design Principles**:
- Every method returns a Result; storage faults are Failure values, not
  exceptions
- Methods take already-mapped CasbinRule entities (mapping rejections are
  handled by the adapter before the store is called)
- No duplicate detection: the store inserts what it is given
"""

from collections.abc import Sequence
from typing import Protocol

from casbin_arango_adapter.core.result import Result
from casbin_arango_adapter.domain.entities.casbin_rule import CasbinRule
from casbin_arango_adapter.domain.errors import PolicyStoreError


class PolicyStoreProtocol(Protocol):
    """Protocol for Casbin rule persistence."""

    async def load_policy(self) -> Result[list[CasbinRule], PolicyStoreError]:
        """Fetch every stored rule.

        Returns:
            Success(list of rules) or Failure(PolicyStoreError).
        """
        ...

    async def save_policy(
        self, rules: Sequence[CasbinRule]
    ) -> Result[None, PolicyStoreError]:
        """Bulk-insert rules. Existing rules are left in place.

        Args:
            rules: Rules to insert.
        """
        ...

    async def clear_policy(self) -> Result[None, PolicyStoreError]:
        """Remove every stored rule."""
        ...

    async def add_policy(self, rule: CasbinRule) -> Result[bool, PolicyStoreError]:
        """Insert one rule.

        Returns:
            Success(True) once inserted, or Failure(PolicyStoreError).
        """
        ...

    async def add_policies(
        self, rules: Sequence[CasbinRule]
    ) -> Result[bool, PolicyStoreError]:
        """Insert several rules in one operation.

        Returns:
            Success(True) once inserted, Success(False) when ``rules`` is
            empty, or Failure(PolicyStoreError).
        """
        ...

    async def remove_policy(
        self, ptype: str, rule: Sequence[str]
    ) -> Result[bool, PolicyStoreError]:
        """Remove the rule whose ptype and six fields match exactly.

        Args:
            ptype: Policy type.
            rule: Positional values, padded with "" to six.

        Returns:
            Success(True) if a rule was removed, Success(False) if none
            matched, or Failure(PolicyStoreError).
        """
        ...

    async def remove_policies(
        self, ptype: str, rules: Sequence[Sequence[str]]
    ) -> Result[bool, PolicyStoreError]:
        """Remove several rules one at a time (not atomic).

        Returns:
            Success(True) when every removal ran, or the first
            Failure(PolicyStoreError); earlier removals stay applied.
        """
        ...

    async def remove_filtered_policy(
        self, ptype: str, field_index: int, field_values: Sequence[str]
    ) -> Result[bool, PolicyStoreError]:
        """Remove rules matching values from ``field_index`` onward.

        An empty value matches anything at its position.

        Args:
            ptype: Policy type.
            field_index: First constrained position (0-5).
            field_values: Values for positions ``field_index`` onward.

        Returns:
            Success(True) if any rule was removed, Success(False) otherwise,
            or Failure(PolicyStoreError).
        """
        ...
