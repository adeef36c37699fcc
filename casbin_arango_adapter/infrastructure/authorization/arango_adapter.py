"""ArangoDB storage adapter for Casbin (AsyncAdapter implementation).

Lets casbin.AsyncEnforcer keep its policy in an ArangoDB collection
instead of a CSV file:
- Maps Casbin policy lines to CasbinRule documents and back
- Delegates every query to a PolicyStoreProtocol implementation
- Turns storage Failure results into PolicyStorageError (Casbin expects
  adapters to raise)

Following hexagonal architecture:
- Casbin-facing code lives here, database-facing code in the policy store
- The store is injected, so tests run against an in-memory store

Usage:
    import casbin

    adapter = ArangoAdapter.from_database(database, collection="casbin")
    enforcer = casbin.AsyncEnforcer("rbac_model.conf", adapter)
    await enforcer.load_policy()

Reference:
    - infrastructure/persistence/arango_policy_store.py
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from casbin.persist.adapters.asyncio import AsyncAdapter

from casbin_arango_adapter.core.result import Failure, Result
from casbin_arango_adapter.domain.entities.casbin_rule import FIELD_COUNT, CasbinRule
from casbin_arango_adapter.domain.errors import PolicyStoreError
from casbin_arango_adapter.domain.value_objects.policy_filter import PolicyFilter
from casbin_arango_adapter.infrastructure.persistence.arango_policy_store import (
    DEFAULT_COLLECTION,
    ArangoPolicyStore,
)

if TYPE_CHECKING:
    from arangoasync.database import StandardDatabase
    from casbin.model import Model

    from casbin_arango_adapter.domain.protocols.logger_protocol import LoggerProtocol
    from casbin_arango_adapter.domain.protocols.policy_store_protocol import (
        PolicyStoreProtocol,
    )

T = TypeVar("T")

# Sections persisted by save_policy
PERSISTED_SECTIONS = ("p", "g")


class PolicyStorageError(Exception):
    """Raised to Casbin when a storage operation fails.

    Attributes:
        error: The PolicyStoreError returned by the store, unchanged.
    """

    def __init__(self, error: PolicyStoreError) -> None:
        super().__init__(str(error))
        self.error = error


class ArangoAdapter(AsyncAdapter):
    """Casbin AsyncAdapter backed by an ArangoDB document collection.

    Holds no locks: the enforcer owning the adapter serializes policy
    mutations when it needs to.

    Attributes:
        _store: Policy store executing the queries.
        _logger: Structured logger.
        _filtered: True after load_filtered_policy(), False after load_policy().
    """

    def __init__(
        self,
        store: "PolicyStoreProtocol",
        logger: "LoggerProtocol | None" = None,
    ) -> None:
        """Initialize adapter with a policy store.

        Args:
            store: Store implementing PolicyStoreProtocol.
            logger: Structured logger. Defaults to the container logger.
        """
        if logger is None:
            from casbin_arango_adapter.core.container import get_logger

            logger = get_logger()

        self._store = store
        self._logger = logger
        self._filtered = False

    @classmethod
    def from_database(
        cls,
        database: "StandardDatabase",
        collection: str = DEFAULT_COLLECTION,
        logger: "LoggerProtocol | None" = None,
    ) -> "ArangoAdapter":
        """Create an adapter storing rules in ``collection`` of ``database``.

        Args:
            database: Connected python-arango-async database handle.
            collection: Rule collection name.
            logger: Structured logger shared by adapter and store.

        Returns:
            ArangoAdapter backed by an ArangoPolicyStore.
        """
        if logger is None:
            from casbin_arango_adapter.core.container import get_logger

            logger = get_logger()

        store = ArangoPolicyStore(
            database, collection, logger=logger.bind(collection=collection)
        )
        return cls(store, logger=logger)

    async def load_policy(self, model: "Model") -> None:
        """Load every stored rule into the model.

        Rules whose section or ptype the model does not declare are skipped.

        Args:
            model: Casbin model to fill.

        Raises:
            PolicyStorageError: If the query failed.
        """
        rules = self._unwrap(await self._store.load_policy())

        loaded = sum(1 for rule in rules if self._load_rule(model, rule))
        self._filtered = False

        self._logger.info("policy_loaded", count=loaded, stored=len(rules))

    async def load_filtered_policy(self, model: "Model", filter: Any) -> None:
        """Load only the stored rules accepted by ``filter``.

        The filter is applied in memory after reading the collection.

        is_filtered() reports True afterwards even when the filter is empty
        (every position a wildcard, or None) and every rule was loaded, so
        Casbin refuses save_policy() until the next load_policy().

        Args:
            model: Casbin model to fill.
            filter: PolicyFilter, or anything PolicyFilter.coerce() accepts
                (objects or mappings with p/g or P/G values).

        Raises:
            PolicyStorageError: If the query failed.
        """
        policy_filter = PolicyFilter.coerce(filter)
        rules = self._unwrap(await self._store.load_policy())

        loaded = 0
        for rule in rules:
            policy = rule.to_policy()
            if policy is None or rule.section is None:
                continue
            if not policy_filter.matches(rule.section, policy):
                continue
            if self._load_rule(model, rule):
                loaded += 1

        self._filtered = True

        self._logger.info(
            "filtered_policy_loaded",
            count=loaded,
            stored=len(rules),
            filter_p=list(policy_filter.p),
            filter_g=list(policy_filter.g),
        )

    def is_filtered(self) -> bool:
        """Whether the last load applied a filter."""
        return self._filtered

    async def save_policy(self, model: "Model") -> bool:
        """Insert every 'p' and 'g' rule of the model.

        Does not clear the collection first; call clear_policy() before
        saving to replace the stored policy.

        Args:
            model: Casbin model to persist.

        Returns:
            bool: True once stored.

        Raises:
            PolicyStorageError: If the insert failed.
        """
        rules: list[CasbinRule] = []
        for section in PERSISTED_SECTIONS:
            for ptype, assertion in model.model.get(section, {}).items():
                for policy in assertion.policy:
                    rule = CasbinRule.from_policy(ptype, policy)
                    if rule is not None:
                        rules.append(rule)

        self._unwrap(await self._store.save_policy(rules))

        self._logger.info("policy_saved", count=len(rules))
        return True

    async def clear_policy(self) -> None:
        """Remove every stored rule.

        Raises:
            PolicyStorageError: If the query failed.
        """
        self._unwrap(await self._store.clear_policy())
        self._logger.info("policy_cleared")

    async def add_policy(self, sec: str, ptype: str, rule: Sequence[str]) -> bool:
        """Store one rule.

        No duplicate check is made here.

        Args:
            sec: Model section (unused; the ptype carries it).
            ptype: Policy type.
            rule: Policy values.

        Returns:
            bool: True once stored, False when ptype or rule is empty
            (storage is not contacted).

        Raises:
            PolicyStorageError: If the insert failed.
        """
        casbin_rule = CasbinRule.from_policy(ptype, rule)
        if casbin_rule is None:
            self._logger.debug("policy_rule_rejected", ptype=ptype, size=len(rule))
            return False

        added = self._unwrap(await self._store.add_policy(casbin_rule))
        self._logger.debug("policy_added", ptype=ptype)
        return added

    async def add_policies(
        self, sec: str, ptype: str, rules: Sequence[Sequence[str]]
    ) -> bool:
        """Store several rules in one insert.

        Rules with no values are dropped from the batch.

        Args:
            sec: Model section (unused).
            ptype: Policy type.
            rules: Policy lines.

        Returns:
            bool: True once stored, False when nothing was left to store.

        Raises:
            PolicyStorageError: If the insert failed.
        """
        mapped = [CasbinRule.from_policy(ptype, rule) for rule in rules]
        casbin_rules = [rule for rule in mapped if rule is not None]

        dropped = len(mapped) - len(casbin_rules)
        if dropped:
            self._logger.debug("policy_rules_rejected", ptype=ptype, count=dropped)

        added = self._unwrap(await self._store.add_policies(casbin_rules))
        self._logger.debug("policies_added", ptype=ptype, count=len(casbin_rules))
        return added

    async def remove_policy(self, sec: str, ptype: str, rule: Sequence[str]) -> bool:
        """Remove the stored rule matching ptype and all values exactly.

        Args:
            sec: Model section (unused).
            ptype: Policy type.
            rule: Policy values (missing trailing values match "").

        Returns:
            bool: True if a rule was removed, False if none matched.

        Raises:
            PolicyStorageError: If the query failed.
        """
        removed = self._unwrap(await self._store.remove_policy(ptype, rule))
        self._logger.debug("policy_removed", ptype=ptype, removed=removed)
        return removed

    async def remove_policies(
        self, sec: str, ptype: str, rules: Sequence[Sequence[str]]
    ) -> bool:
        """Remove several rules, one query per rule.

        Not atomic: if a query fails, earlier removals stay applied.

        Args:
            sec: Model section (unused).
            ptype: Policy type.
            rules: Policy lines to remove.

        Returns:
            bool: True once every removal ran.

        Raises:
            PolicyStorageError: On the first failed query.
        """
        removed = self._unwrap(await self._store.remove_policies(ptype, rules))
        self._logger.debug("policies_removed", ptype=ptype, count=len(rules))
        return removed

    async def remove_filtered_policy(
        self, sec: str, ptype: str, field_index: int, *field_values: str
    ) -> bool:
        """Remove stored rules matching values from ``field_index`` onward.

        An empty value leaves its position unconstrained. Nothing is removed
        (and storage is not contacted) when ``field_index`` is outside 0-5,
        when no values are given, or when every value is empty.

        Args:
            sec: Model section (unused).
            ptype: Policy type.
            field_index: First constrained position.
            *field_values: Values for positions ``field_index`` onward.

        Returns:
            bool: True if any rule was removed.

        Raises:
            PolicyStorageError: If the query failed.
        """
        if not 0 <= field_index < FIELD_COUNT or not any(field_values):
            self._logger.debug(
                "filtered_removal_skipped",
                ptype=ptype,
                field_index=field_index,
                size=len(field_values),
            )
            return False

        removed = self._unwrap(
            await self._store.remove_filtered_policy(
                ptype, field_index, list(field_values)
            )
        )
        self._logger.debug(
            "filtered_policy_removed",
            ptype=ptype,
            field_index=field_index,
            removed=removed,
        )
        return removed

    def _load_rule(self, model: "Model", rule: CasbinRule) -> bool:
        """Insert one stored rule into the model's two-level lookup.

        Returns:
            bool: True if the model accepted the rule.
        """
        policy = rule.to_policy()
        section = rule.section
        if policy is None or section is None:
            return False

        assertions = model.model.get(section)
        if assertions is None or rule.ptype not in assertions:
            self._logger.debug("policy_type_skipped", ptype=rule.ptype)
            return False

        model.add_policy(section, rule.ptype, policy)
        return True

    def _unwrap(self, result: Result[T, PolicyStoreError]) -> T:
        if isinstance(result, Failure):
            raise PolicyStorageError(result.error)
        return result.value
