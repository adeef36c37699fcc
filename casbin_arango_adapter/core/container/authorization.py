"""Authorization dependency factories.

Builds the ArangoDB-backed Casbin adapter and an AsyncEnforcer using it.
The enforcer is a process-scoped singleton initialized once at startup.
"""

from typing import TYPE_CHECKING

from casbin_arango_adapter.core.config import settings
from casbin_arango_adapter.core.container.infrastructure import (
    get_arango_database,
    get_logger,
)

if TYPE_CHECKING:
    from casbin import AsyncEnforcer

    from casbin_arango_adapter.infrastructure.authorization.arango_adapter import (
        ArangoAdapter,
    )


# Module-level state for enforcer singleton
_enforcer: "AsyncEnforcer | None" = None


async def create_adapter() -> "ArangoAdapter":
    """Connect to ArangoDB and build an adapter for the configured collection.

    Creates the collection first when ``create_collection`` is enabled.

    Returns:
        ArangoAdapter storing rules in ``settings.casbin_collection``.
    """
    from casbin_arango_adapter.infrastructure.authorization.arango_adapter import (
        ArangoAdapter,
    )

    logger = get_logger()
    arango = get_arango_database()
    database = await arango.connect()

    collection = settings.casbin_collection
    if settings.create_collection and await arango.ensure_collection(collection):
        logger.warning("policy_collection_created", collection=collection)

    logger.info(
        "arango_adapter_initialized",
        url=settings.arango_url,
        database=settings.arango_database,
        collection=collection,
    )
    return ArangoAdapter.from_database(database, collection=collection, logger=logger)


async def init_enforcer(model_path: str) -> "AsyncEnforcer":
    """Initialize the Casbin AsyncEnforcer at application startup.

    Creates the enforcer with the model at ``model_path`` and the ArangoDB
    adapter, then loads the stored policy.

    Args:
        model_path: Path to the Casbin model .conf file.

    Returns:
        Initialized AsyncEnforcer instance.

    Raises:
        RuntimeError: If enforcer is already initialized.
    """
    global _enforcer

    if _enforcer is not None:
        raise RuntimeError("Enforcer already initialized")

    import casbin

    adapter = await create_adapter()
    enforcer = casbin.AsyncEnforcer(model_path, adapter)
    await enforcer.load_policy()

    _enforcer = enforcer
    get_logger().info("casbin_enforcer_initialized", model_path=model_path)
    return enforcer


def get_enforcer() -> "AsyncEnforcer":
    """Get Casbin AsyncEnforcer singleton.

    Returns:
        The initialized enforcer.

    Raises:
        RuntimeError: If called before init_enforcer().
    """
    if _enforcer is None:
        raise RuntimeError(
            "Enforcer not initialized. Call init_enforcer() during startup."
        )
    return _enforcer


async def shutdown_enforcer() -> None:
    """Drop the enforcer singleton and close the ArangoDB client."""
    global _enforcer

    _enforcer = None
    await get_arango_database().close()
