from __future__ import annotations

from typing import Any, Dict, List, Tuple
from uuid import uuid4

from pymongo.errors import PyMongoError


class _InsertOneResult:
    def __init__(self, inserted_id: str):
        self.inserted_id = inserted_id


class CollectionStub:  # noqa: D101
    def __init__(self, client: "MongoClientStub", database: str, name: str):
        self._client = client
        self.database = database
        self.name = name

    async def insert_one(self, document: Dict[str, Any]):
        if self._client.closed:
            raise RuntimeError("insert on a closed client")
        factory = self._client.factory
        if factory.insert_error is not None:
            raise factory.insert_error
        stored = dict(document)
        stored["_id"] = uuid4().hex
        factory.writes.append((self.database, self.name, stored))
        return _InsertOneResult(stored["_id"])


class _DatabaseStub:
    def __init__(self, client: "MongoClientStub", name: str):
        self._client = client
        self.name = name

    def __getitem__(self, collection: str) -> CollectionStub:
        return CollectionStub(self._client, self.name, collection)

    async def command(self, name: str):
        error: PyMongoError | None = self._client.factory.ping_error
        if error is not None:
            raise error
        return {"ok": 1.0, "command": name}


class MongoClientStub:  # noqa: D101
    def __init__(self, factory: "MongoStubFactory", uri: str, timeout_ms: int):
        self.factory = factory
        self.uri = uri
        self.timeout_ms = timeout_ms
        self.closed = False
        self.admin = _DatabaseStub(self, "admin")

    def __getitem__(self, database: str) -> _DatabaseStub:
        return _DatabaseStub(self, database)

    async def close(self):
        self.closed = True


class MongoStubFactory:
    """Drop-in for ``create_mongo_client`` that never touches the network.

    Set ``ping_error`` / ``insert_error`` to a pymongo exception to simulate
    an unreachable server or a failed write.
    """

    def __init__(self):
        self.clients: List[MongoClientStub] = []
        self.writes: List[Tuple[str, str, Dict[str, Any]]] = []
        self.ping_error: PyMongoError | None = None
        self.insert_error: PyMongoError | None = None

    def __call__(self, uri: str, timeout_ms: int) -> MongoClientStub:
        client = MongoClientStub(self, uri, timeout_ms)
        self.clients.append(client)
        return client

    @property
    def documents(self) -> List[Dict[str, Any]]:
        return [doc for _db, _coll, doc in self.writes]

    @property
    def open_clients(self) -> List[MongoClientStub]:
        return [c for c in self.clients if not c.closed]
