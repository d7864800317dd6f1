"""
Shared fixtures: sample profiles/programs and an in-memory stand-in for the
motor database used by the catalog and profile services.
"""
from types import SimpleNamespace

import pytest
from bson import ObjectId

from janseva.models import Program, UserProfile


def make_profile(**overrides) -> UserProfile:
    data = {
        "role": "Student",
        "age": 20,
        "gender": "Female",
        "state": "Maharashtra",
        "category": "OBC",
        "religion": "Hindu",
        "education_level": "Undergraduate",
        "class_level": "Graduation",
        "course": "Engineering",
        "annual_income": 150000,
    }
    data.update(overrides)
    return UserProfile(**data)


def make_program(**overrides) -> Program:
    data = {
        "id": "prog-1",
        "kind": "scheme",
        "name": "Test Scheme",
        "lifecycle_status": "active",
        "is_published": True,
    }
    data.update(overrides)
    return Program(**data)


@pytest.fixture
def student_profile():
    return make_profile()


@pytest.fixture
def open_program():
    return make_program()


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        self._iter = iter(self._docs)
        return self

    async def __anext__(self):
        try:
            return dict(next(self._iter))
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    """Implements the handful of motor collection calls the services use"""

    def __init__(self):
        self.docs = []

    def _matches(self, doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def find(self, query):
        return FakeCursor(doc for doc in self.docs if self._matches(doc, query))

    async def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, doc):
        stored = dict(doc)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, query, update, upsert=False):
        for doc in self.docs:
            if self._matches(doc, query):
                doc.update(update.get("$set", {}))
                return SimpleNamespace(modified_count=1, upserted_id=None)
        if upsert:
            stored = dict(query)
            stored.update(update.get("$set", {}))
            stored.setdefault("_id", ObjectId())
            self.docs.append(stored)
            return SimpleNamespace(modified_count=0, upserted_id=stored["_id"])
        return SimpleNamespace(modified_count=0, upserted_id=None)

    async def delete_one(self, query):
        for index, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db():
    return FakeDatabase()
