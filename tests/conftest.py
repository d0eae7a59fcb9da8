"""Shared test fixtures for CookBook backend tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from fastapi.testclient import TestClient

from cookbook.progress_updates.dependencies import (
    get_progress_update_service,
    get_progress_update_store,
)
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService


class InMemoryProgressUpdateStore:
    """Stands in for ProgressUpdateStore without a MongoDB server."""

    def __init__(self):
        self.documents = []
        self.save_error = None

    async def save(self, document):
        if self.save_error is not None:
            raise self.save_error
        doc = dict(document)
        doc.setdefault("_id", ObjectId())
        self.documents.append(doc)
        return self._format(doc)

    async def find_by_user_id(self, user_id):
        return [self._format(d) for d in self.documents if d["userId"] == user_id]

    async def ensure_indexes(self):
        return None

    @staticmethod
    def _format(doc):
        return {
            "id": str(doc["_id"]),
            "userId": doc["userId"],
            "templateType": doc["templateType"],
            "content": doc["content"],
            "learningPlanId": doc.get("learningPlanId"),
            "createdAt": doc.get("createdAt"),
        }


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like insert_one and
    # create_index stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def sample_progress_doc(sample_user_id):
    return {
        "_id": ObjectId(),
        "userId": sample_user_id,
        "templateType": "weekly",
        "content": "Lost 2kg",
        "learningPlanId": "lp1",
        "createdAt": datetime.now(timezone.utc),
    }


@pytest.fixture
def in_memory_store():
    return InMemoryProgressUpdateStore()


@pytest.fixture
def client(in_memory_store):
    from api import app

    service = ProgressUpdateService(store=in_memory_store)
    app.dependency_overrides[get_progress_update_store] = lambda: in_memory_store
    app.dependency_overrides[get_progress_update_service] = lambda: service

    # No context manager: the lifespan (MongoDB connect) is not run
    yield TestClient(app)

    app.dependency_overrides.clear()
