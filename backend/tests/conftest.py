from __future__ import annotations

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from moodchef.core.config import settings
from moodchef.db.init import get_db
from moodchef.db.models.recipe import RecipeDoc
from moodchef.main import app
from moodchef.services.seed import SEED_RECIPES


# ── In-memory stand-in for the motor collection API the app uses ─────────


def _matches(doc: dict, query: dict) -> bool:
    for key, cond in query.items():
        if key == "$and":
            if not all(_matches(doc, q) for q in cond):
                return False
        elif isinstance(cond, dict) and "$in" in cond:
            val = doc.get(key)
            vals = val if isinstance(val, list) else [val]
            if not any(v in cond["$in"] for v in vals):
                return False
        elif doc.get(key) != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict], fail: bool = False):
        self._docs = docs
        self._fail = fail

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, n: int):
        if n:
            self._docs = self._docs[:n]
        return self

    async def to_list(self, length=None):
        if self._fail:
            raise ServerSelectionTimeoutError("no servers available")
        docs = self._docs if length is None else self._docs[:length]
        return copy.deepcopy(docs)


class FakeCollection:
    def __init__(self):
        self.docs: list[dict] = []
        self.queries: list[dict] = []
        self.indexes: list = []
        self.fail = False

    def load(self, docs) -> None:
        for d in docs:
            self.docs.append({"_id": ObjectId(), **copy.deepcopy(d)})

    def find(self, query=None, projection=None):
        query = query or {}
        self.queries.append(query)
        return FakeCursor([d for d in self.docs if _matches(d, query)], fail=self.fail)

    async def delete_many(self, query):
        if self.fail:
            raise ServerSelectionTimeoutError("no servers available")
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    async def insert_many(self, docs):
        if self.fail:
            raise ServerSelectionTimeoutError("no servers available")
        ids = []
        for d in docs:
            d.setdefault("_id", ObjectId())
            self.docs.append(copy.deepcopy(d))
            ids.append(d["_id"])
        return SimpleNamespace(inserted_ids=ids)

    async def create_index(self, keys, **options):
        self.indexes.append(keys)
        return "_".join(f"{k}_{v}" for k, v in keys)


class FakeDatabase:
    def __init__(self):
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())

    async def command(self, name):
        return {"ok": 1.0}


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def recipes(fake_db) -> FakeCollection:
    return fake_db[settings.RECIPES_COLLECTION]


@pytest.fixture
def seeded(recipes) -> FakeCollection:
    recipes.load(RecipeDoc(**r).model_dump() for r in SEED_RECIPES)
    return recipes


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()
