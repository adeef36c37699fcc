"""ArangoDB connection management.

Owns the async ArangoDB client (python-arango-async) and hands out the
database handle the policy store runs AQL against.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides the database handle to the policy store
- Handles client lifetime and collection bootstrap
"""

from typing import TYPE_CHECKING, Any

from arangoasync import ArangoClient
from arangoasync.auth import Auth

if TYPE_CHECKING:
    from arangoasync.database import StandardDatabase


class ArangoDatabase:
    """ArangoDB client and database handle management.

    The driver's HTTP session is shared by every call made through the
    handle; no extra synchronization is added here.

    Usage:
        async with ArangoDatabase(url, "_system", "root", password) as db:
            await db.ensure_collection("casbin")
            store = ArangoPolicyStore(db.database, collection="casbin")
    """

    def __init__(
        self,
        url: str,
        database: str,
        username: str,
        password: str,
        **client_options: Any,
    ) -> None:
        """Initialize with connection parameters. Does not connect.

        Args:
            url: ArangoDB coordinator URL (e.g., http://localhost:8529).
            database: Database name.
            username: ArangoDB user name.
            password: ArangoDB password.
            **client_options: Extra keyword arguments for ArangoClient.
        """
        self.url = url
        self.database_name = database
        self._auth = Auth(username=username, password=password)
        self._client_options = client_options
        self._client: ArangoClient | None = None
        self._database: "StandardDatabase | None" = None

    @property
    def database(self) -> "StandardDatabase":
        """Connected database handle.

        Raises:
            RuntimeError: If connect() has not been awaited.
        """
        if self._database is None:
            raise RuntimeError("ArangoDatabase not connected. Call connect() first.")
        return self._database

    @property
    def is_connected(self) -> bool:
        """True once connect() succeeded and close() was not called."""
        return self._database is not None

    async def connect(self) -> "StandardDatabase":
        """Create the client and open the database.

        Idempotent: a second call returns the existing handle. If the
        handshake fails the new client is closed and nothing is kept, so
        connect() can simply be retried.

        Returns:
            StandardDatabase: Handle for AQL execution.
        """
        if self._database is not None:
            return self._database

        client = ArangoClient(hosts=self.url, **self._client_options)
        try:
            database = await client.db(
                self.database_name,
                auth=self._auth,
                verify=True,
            )
        except BaseException:
            # Failed handshake: release the HTTP session before re-raising
            await client.close()
            raise

        self._client = client
        self._database = database
        return database

    async def ensure_collection(self, name: str) -> bool:
        """Create a document collection when it does not exist.

        Args:
            name: Collection name.

        Returns:
            bool: True if the collection was created, False if it existed.
        """
        database = self.database
        if await database.has_collection(name):
            return False
        await database.create_collection(name)
        return True

    async def close(self) -> None:
        """Close the client session. Safe to call more than once."""
        if self._client is not None:
            await self._client.close()
        self._client = None
        self._database = None

    async def __aenter__(self) -> "ArangoDatabase":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
