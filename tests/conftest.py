"""
Shared fixtures: an in-memory stand-in for the ideas collection
"""
import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import InsertOneResult

from app.config.database import db_config
from app.main import app


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])


class FakeCollection:
    """Implements the subset of AsyncIOMotorCollection the API uses"""

    def __init__(self):
        self.documents = []

    async def insert_one(self, document):
        # Like pymongo, assign _id on the caller's dict
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], acknowledged=True)

    def _matches(self, document, filter_query):
        return all(document.get(key) == value for key, value in filter_query.items())

    async def find_one(self, filter_query):
        for document in self.documents:
            if self._matches(document, filter_query):
                return copy.deepcopy(document)
        return None

    def find(self, filter_query=None, projection=None):
        found = [
            copy.deepcopy(document)
            for document in self.documents
            if self._matches(document, filter_query or {})
        ]
        if projection:
            keep = {key for key, include in projection.items() if include} | {"_id"}
            found = [
                {key: value for key, value in document.items() if key in keep}
                for document in found
            ]
        return FakeCursor(found)


@pytest.fixture
def ideas_collection():
    db_config.reset()
    collection = FakeCollection()
    db_config.collection = collection
    yield collection
    db_config.reset()


@pytest.fixture
def client(ideas_collection):
    return TestClient(app)


@pytest.fixture
def valid_payload():
    return {
        "id": "1",
        "address": "0xabc",
        "timestamp": 123,
        "ideaOwner": "alice",
        "contactEmail": "a@x.com",
        "ideaName": "Idea",
        "ideaDescription": "desc",
        "category": "tech",
        "proofOfConcept": "poc",
        "supportingDocuments": [],
        "expectedOutcome": "outcome",
        "currentStage": "draft",
    }
