"""ArangoDB implementation of PolicyStoreProtocol.

Runs the AQL built in aql.py against a document collection and maps
documents to CasbinRule entities.

- Async driver (python-arango-async) for every query
- Result types for error handling (storage faults come back as Failure)
- No duplicate detection and no cross-query transactions

Usage:
    from casbin_arango_adapter.infrastructure.persistence import ArangoPolicyStore

    store = ArangoPolicyStore(database, collection="casbin")
    result = await store.load_policy()
    match result:
        case Success(value=rules):
            ...
        case Failure(error=error):
            logger.error("load failed", reason=error.message)
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from arangoasync.exceptions import ArangoError

from casbin_arango_adapter.core.enums import ErrorCode
from casbin_arango_adapter.core.result import Failure, Result, Success, map_value
from casbin_arango_adapter.domain.entities.casbin_rule import CasbinRule
from casbin_arango_adapter.domain.errors import PolicyStoreError
from casbin_arango_adapter.infrastructure.persistence import aql
from casbin_arango_adapter.infrastructure.persistence.aql import AqlQuery

if TYPE_CHECKING:
    from arangoasync.database import StandardDatabase

    from casbin_arango_adapter.domain.protocols.logger_protocol import LoggerProtocol

DEFAULT_COLLECTION = "casbin"


class ArangoPolicyStore:
    """ArangoDB implementation of PolicyStoreProtocol.

    Stateless: all state lives in the collection. The database handle (and
    its HTTP session) may be shared with other stores.

    Attributes:
        database: Connected database handle.
        collection: Name of the rule collection.
    """

    def __init__(
        self,
        database: "StandardDatabase",
        collection: str = DEFAULT_COLLECTION,
        logger: "LoggerProtocol | None" = None,
    ) -> None:
        """Initialize store with a database handle.

        Args:
            database: Connected database handle (see ArangoDatabase).
            collection: Rule collection name.
            logger: Optional structured logger for query failures.
        """
        self.database = database
        self.collection = collection
        self._logger = logger

    async def load_policy(self) -> Result[list[CasbinRule], PolicyStoreError]:
        """Fetch every stored rule.

        Returns:
            Result[list[CasbinRule], PolicyStoreError]:
                - Success(rules) in collection order
                - Failure(PolicyStoreError) if the query failed
        """
        result = await self._run(
            "load_policy", ErrorCode.POLICY_LOAD_FAILED, aql.load_all(self.collection)
        )
        return map_value(
            result, lambda docs: [CasbinRule.from_document(doc) for doc in docs]
        )

    async def save_policy(
        self, rules: Sequence[CasbinRule]
    ) -> Result[None, PolicyStoreError]:
        """Bulk-insert rules without clearing the collection first.

        Args:
            rules: Rules to insert. Nothing is sent when empty.

        Returns:
            Result[None, PolicyStoreError]: Success(None) or the query failure.
        """
        if not rules:
            return Success(value=None)

        result = await self._run(
            "save_policy",
            ErrorCode.POLICY_SAVE_FAILED,
            aql.insert_many(self.collection, [rule.to_document() for rule in rules]),
            count=len(rules),
        )
        return map_value(result, lambda _: None)

    async def clear_policy(self) -> Result[None, PolicyStoreError]:
        """Remove every document in the collection.

        Returns:
            Result[None, PolicyStoreError]: Success(None) or the query failure.
        """
        result = await self._run(
            "clear_policy",
            ErrorCode.POLICY_CLEAR_FAILED,
            aql.remove_all(self.collection),
        )
        return map_value(result, lambda _: None)

    async def add_policy(self, rule: CasbinRule) -> Result[bool, PolicyStoreError]:
        """Insert one rule.

        Args:
            rule: Rule to insert.

        Returns:
            Result[bool, PolicyStoreError]: Success(True) or the query failure
            (a unique index violation surfaces here too).
        """
        result = await self._run(
            "add_policy",
            ErrorCode.POLICY_ADD_FAILED,
            aql.insert_one(self.collection, rule.to_document()),
            ptype=rule.ptype,
        )
        return map_value(result, lambda _: True)

    async def add_policies(
        self, rules: Sequence[CasbinRule]
    ) -> Result[bool, PolicyStoreError]:
        """Insert several rules in one query.

        Args:
            rules: Rules to insert.

        Returns:
            Result[bool, PolicyStoreError]: Success(True) once inserted,
            Success(False) without querying when ``rules`` is empty.
        """
        if not rules:
            return Success(value=False)

        result = await self._run(
            "add_policies",
            ErrorCode.POLICY_ADD_FAILED,
            aql.insert_many(self.collection, [rule.to_document() for rule in rules]),
            count=len(rules),
        )
        return map_value(result, lambda _: True)

    async def remove_policy(
        self, ptype: str, rule: Sequence[str]
    ) -> Result[bool, PolicyStoreError]:
        """Remove rules matching ptype and all six fields exactly.

        Args:
            ptype: Policy type.
            rule: Positional values, padded with "" to six.

        Returns:
            Result[bool, PolicyStoreError]: Success(True) if a document was
            removed, Success(False) if nothing matched.
        """
        result = await self._run(
            "remove_policy",
            ErrorCode.POLICY_REMOVE_FAILED,
            aql.remove_exact(self.collection, ptype, rule),
            ptype=ptype,
        )
        return map_value(result, bool)

    async def remove_policies(
        self, ptype: str, rules: Sequence[Sequence[str]]
    ) -> Result[bool, PolicyStoreError]:
        """Remove rules one query at a time.

        Not atomic: on failure, removals already applied stay applied.

        Args:
            ptype: Policy type.
            rules: Positional values of each rule.

        Returns:
            Result[bool, PolicyStoreError]: Success(True) after the whole batch
            ran, or the first Failure.
        """
        for rule in rules:
            result = await self.remove_policy(ptype, rule)
            if isinstance(result, Failure):
                return result
        return Success(value=True)

    async def remove_filtered_policy(
        self, ptype: str, field_index: int, field_values: Sequence[str]
    ) -> Result[bool, PolicyStoreError]:
        """Remove rules matching ``field_values`` from ``field_index`` onward.

        Args:
            ptype: Policy type.
            field_index: First constrained position (0-5).
            field_values: Values for positions ``field_index`` onward; empty
                values match anything.

        Returns:
            Result[bool, PolicyStoreError]: Success(True) if any document was
            removed, Success(False) otherwise.

        Raises:
            ValueError: If field_index is outside 0-5 (checked before any query).
        """
        result = await self._run(
            "remove_filtered_policy",
            ErrorCode.POLICY_REMOVE_FAILED,
            aql.remove_filtered(self.collection, ptype, field_index, field_values),
            ptype=ptype,
            field_index=field_index,
        )
        return map_value(result, bool)

    async def _run(
        self,
        operation: str,
        code: ErrorCode,
        query: AqlQuery,
        **details: Any,
    ) -> Result[list[Any], PolicyStoreError]:
        """Execute a query and drain its cursor.

        Args:
            operation: Store operation name (for error context).
            code: Error code used when the query fails.
            query: Query to execute.
            **details: Extra error context (ptype, count, ...).

        Returns:
            Result[list[Any], PolicyStoreError]: Every element the query
            returned, or a Failure wrapping the driver error.
        """
        try:
            cursor = await self.database.aql.execute(
                query.query, bind_vars=query.bind_vars
            )
            async with cursor:
                return Success(value=[item async for item in cursor])

        except ArangoError as e:
            # Connection loss, malformed query, server-side error
            return self._failure(operation, code, e, **details)
        except Exception as e:
            # Unexpected errors (should be rare)
            return self._failure(operation, code, e, unexpected=True, **details)

    def _failure(
        self,
        operation: str,
        code: ErrorCode,
        exc: Exception,
        *,
        unexpected: bool = False,
        **details: Any,
    ) -> Failure[PolicyStoreError]:
        prefix = "Unexpected error in" if unexpected else "Failed to run"
        if unexpected:
            details["unexpected"] = True
        error = PolicyStoreError(
            code=code,
            message=f"{prefix} {operation}: {exc}",
            operation=operation,
            collection=self.collection,
            details={"error_type": type(exc).__name__, **details},
        )
        if self._logger is not None:
            self._logger.error(
                "policy_query_failed",
                error=exc,
                operation=operation,
                collection=self.collection,
                **details,
            )
        return Failure(error=error)
