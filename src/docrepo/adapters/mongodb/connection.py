"""MongoDB adapter – MongoConnection, the collection provider for repositories."""

from __future__ import annotations

import logging
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorClient

from docrepo.adapters.mongodb.settings import MongoSettings
from docrepo.config.settings import EnvSettingsLoader

logger = logging.getLogger(__name__)


class MongoConnection:
    """Lazily opened motor client bound to one database.

    Repositories only need :meth:`collection`, so a connection can be passed
    straight in as their collection provider::

        async with MongoConnection.from_env() as conn:
            users = UserRepository(conn.collection)
            page = await users.find_with_pagination({"limit": 20})
    """

    def __init__(
        self,
        settings: MongoSettings | None = None,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ) -> None:
        self.settings = settings or MongoSettings()
        self._client_factory = client_factory
        self._client: Any = None

    @classmethod
    def from_env(cls) -> "MongoConnection":
        return cls(EnvSettingsLoader().load(MongoSettings))

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(
                self.settings.url,
                serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
            )
            logger.debug("mongo.connected database=%s", self.settings.database)
        return self._client

    @property
    def database(self) -> Any:
        return self.client[self.settings.database]

    def collection(self, name: str) -> Any:
        return self.database[name]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("mongo.closed database=%s", self.settings.database)

    async def __aenter__(self) -> "MongoConnection":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


__all__ = ["MongoConnection"]
