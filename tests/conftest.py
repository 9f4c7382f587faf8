import asyncio
import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from warmpaws_api.app.core.db import Storage, get_storage
from warmpaws_api.app.main import app


def _matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    for key, condition in (query or {}).items():
        value = document.get(key)
        if isinstance(condition, dict) and "$in" in condition:
            if value not in condition["$in"]:
                return False
        elif value != condition:
            return False
    return True


class CallGate:
    """Holds every call until ``expected`` calls have started.

    Awaiting the calls one after another never opens the gate and
    fails with ``TimeoutError``.
    """

    def __init__(self, expected: int, timeout: float = 1.0) -> None:
        self.expected = expected
        self.timeout = timeout
        self.started = 0
        self.finished = 0
        self._open = asyncio.Event()

    async def wait(self) -> None:
        self.started += 1
        if self.started >= self.expected:
            self._open.set()
        await asyncio.wait_for(self._open.wait(), timeout=self.timeout)
        self.finished += 1


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]], gate: Optional[CallGate] = None):
        self._documents = documents
        self._limit = 0
        self._gate = gate

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents = sorted(
            self._documents,
            key=lambda d: (d.get(key) is not None, d.get(key)),
            reverse=direction < 0,
        )
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if self._gate is not None:
            await self._gate.wait()
        documents = self._documents
        if self._limit:
            documents = documents[: self._limit]
        return [copy.deepcopy(d) for d in documents]


class FakeCollection:
    """In‑memory stand‑in for an async Mongo collection."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.find_queries: List[Optional[Dict[str, Any]]] = []
        self.fail_with: Optional[Exception] = None
        self.gate: Optional[CallGate] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._check()
        self.find_queries.append(query)
        return FakeCursor([d for d in self.documents if _matches(d, query)], self.gate)

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check()
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._check()
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> UpdateResult:
        self._check()
        for document in self.documents:
            if _matches(document, query):
                changes = update["$set"]
                modified = any(document.get(k) != v for k, v in changes.items())
                document.update(changes)
                return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        self._check()
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)

    async def count_documents(self, query: Dict[str, Any]) -> int:
        self._check()
        if self.gate is not None:
            await self.gate.wait()
        return len([d for d in self.documents if _matches(d, query)])


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture()
def storage() -> Storage:
    return Storage(FakeDatabase())


@pytest.fixture()
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    # Not used as a context manager so the lifespan (real MongoDB
    # connection) is not started.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def call_gate():
    return CallGate
