"""MongoDB access for submission records."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

from pymongo import AsyncMongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from form_ingest.models import SubmissionRecord
from form_ingest.settings import Settings
from form_ingest.utils.errors import StoreConnectionError, StoreWriteError
from .logger import logger

DATABASE_NAME = "meuJogoRobloxDB"
COLLECTION_NAME = "formularios"

ClientFactory = Callable[[str, int], Any]


def create_mongo_client(uri: str, timeout_ms: int) -> AsyncMongoClient:
    # The client is lazy: no socket is opened until the first operation.
    return AsyncMongoClient(uri, serverSelectionTimeoutMS=timeout_ms, appname="form-ingest")


class SubmissionStore:
    """Owns the MongoDB client(s) used by the ingest route.

    In the default pooled mode one client (and its connection pool) lives for
    the whole process, opened by :meth:`open` and released by :meth:`close`
    from the app lifespan.  With ``mongo_connect_per_request`` every
    :meth:`connection` scope builds, pings and closes its own client.
    """

    def __init__(self, settings: Settings, client_factory: ClientFactory = create_mongo_client):
        self._uri = settings.mongo_uri
        self._timeout_ms = settings.mongo_timeout_ms
        self._per_request = settings.mongo_connect_per_request
        self._client_factory = client_factory
        self._client: Any | None = None

    @property
    def per_request(self) -> bool:
        return self._per_request

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> None:
        if self._per_request or self._client is not None:
            return
        self._client = self._client_factory(self._uri, self._timeout_ms)
        try:
            await self._ping(self._client)
        except StoreConnectionError as exc:
            # Not fatal: the pool reconnects on demand and each request
            # reports its own failure.
            logger.warning("mongo.unreachable_at_startup", extra={"error": str(exc)})
        else:
            logger.info("mongo.connected", extra={"mode": "pooled"})

    async def close(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await self._close_client(client)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[Any]:
        """Yield the submissions collection for the lifetime of one request."""
        if not self._per_request:
            if self._client is None:
                raise StoreConnectionError("submission store is not open")
            yield self._collection(self._client)
            return

        client = self._client_factory(self._uri, self._timeout_ms)
        try:
            await self._ping(client)
            logger.info("mongo.connected", extra={"mode": "per_request"})
            yield self._collection(client)
        finally:
            await self._close_client(client)

    async def insert(self, collection: Any, record: SubmissionRecord) -> Any:
        try:
            result = await collection.insert_one(record.to_document())
        except ConnectionFailure as exc:
            raise StoreConnectionError(str(exc)) from exc
        except PyMongoError as exc:
            raise StoreWriteError(str(exc)) from exc

        logger.info(
            "submission.inserted",
            extra={"inserted_id": str(result.inserted_id), "collection": COLLECTION_NAME},
        )
        return result.inserted_id

    @staticmethod
    def _collection(client: Any) -> Any:
        return client[DATABASE_NAME][COLLECTION_NAME]

    @staticmethod
    async def _ping(client: Any) -> None:
        try:
            await client.admin.command("ping")
        except PyMongoError as exc:
            raise StoreConnectionError(str(exc)) from exc

    @staticmethod
    async def _close_client(client: Any) -> None:
        try:
            await client.close()
        except PyMongoError:
            logger.warning("mongo.close_failed", exc_info=True)
        else:
            logger.info("mongo.disconnected")
