from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from people_api.app.dao.people_dao import PeopleDao
from people_api.app.services.memory_people_service import MemoryPeopleService
from people_api.app.services.people_service import PeopleService


class StubCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        return [dict(doc) for doc in self._docs]


class StubCollection:
    """Small in-process stand-in for a motor collection.

    Enforces the case-insensitive unique (firstname, lastname) index and
    raises ``fail_with`` from every operation when it is set.
    """

    name = "people"

    def __init__(self, docs=None):
        self.docs = [dict(doc) for doc in docs or []]
        self.indexes = []
        self.fail_with = None

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, doc, exclude_id=None):
        key = (doc.get("firstname", "").lower(), doc.get("lastname", "").lower())
        for other in self.docs:
            if other["_id"] == exclude_id:
                continue
            if (other["firstname"].lower(), other["lastname"].lower()) == key:
                raise DuplicateKeyError("E11000 duplicate key error collection: people.people", 11000)

    def _position(self, query):
        for index, doc in enumerate(self.docs):
            if doc["_id"] == query["_id"]:
                return index
        return None

    async def create_indexes(self, indexes):
        self._check_failure()
        self.indexes.extend(indexes)
        return [index.document["name"] for index in indexes]

    def find(self, query):
        self._check_failure()
        return StubCursor(self.docs)

    async def find_one(self, query):
        self._check_failure()
        position = self._position(query)
        return dict(self.docs[position]) if position is not None else None

    async def insert_one(self, doc):
        self._check_failure()
        self._check_unique(doc)
        doc["_id"] = ObjectId()
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self._check_failure()
        position = self._position(query)
        if position is None:
            return None
        before = self.docs[position]
        after = {**before, **update["$set"]}
        self._check_unique(after, exclude_id=before["_id"])
        self.docs[position] = after
        return dict(after if return_document == ReturnDocument.AFTER else before)

    async def find_one_and_delete(self, query):
        self._check_failure()
        position = self._position(query)
        if position is None:
            return None
        return self.docs.pop(position)


@pytest.fixture
def collection():
    return StubCollection()


@pytest.fixture
def people_dao(collection):
    return PeopleDao(collection)


@pytest.fixture
def people_service(people_dao):
    return PeopleService(people_dao)


@pytest.fixture
def memory_service():
    return MemoryPeopleService()


@pytest.fixture
def empty_memory_service():
    return MemoryPeopleService(seed=[])
