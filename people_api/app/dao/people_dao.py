"""
Data access object for the people collection.

Each method is a thin pass‑through to the motor collection.  Documents
are returned as plain dicts in which the ``_id`` ObjectId has been
replaced by a string ``id``; "nothing found" is always ``None``.
Driver errors (``PyMongoError``) and malformed identifiers
(``bson.errors.InvalidId``) propagate to the caller untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, IndexModel, ReturnDocument
from pymongo.collation import Collation

logger = logging.getLogger(__name__)

# Strength 2 compares letters without regard to case.
NAME_INDEX = IndexModel(
    [("firstname", ASCENDING), ("lastname", ASCENDING)],
    name="firstname_lastname_unique",
    unique=True,
    collation=Collation(locale="en", strength=2),
)


class PeopleDao:
    """Raw storage operations on person documents."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def ensure_indexes(self) -> None:
        """Create the unique case‑insensitive name index if missing."""
        await self._collection.create_indexes([NAME_INDEX])
        logger.info("Ensured indexes on collection '%s'", self._collection.name)

    async def find(self) -> Optional[List[Dict[str, Any]]]:
        """Return every person, or ``None`` when the collection is empty."""
        docs = await self._collection.find({}).to_list(length=None)
        if not docs:
            return None
        return [self._to_json(doc) for doc in docs]

    async def find_by_id(self, person_id: str) -> Optional[Dict[str, Any]]:
        doc = await self._collection.find_one({"_id": ObjectId(person_id)})
        return self._to_json(doc) if doc else None

    async def save(self, person: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``person`` and return it with its generated id."""
        doc = dict(person)
        doc.pop("id", None)
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._to_json(doc)

    async def find_by_id_and_update(
        self, person_id: str, changes: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Apply ``changes`` with ``$set`` and return the updated document."""
        if not changes:
            # MongoDB rejects an empty $set.
            return await self.find_by_id(person_id)
        doc = await self._collection.find_one_and_update(
            {"_id": ObjectId(person_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_json(doc) if doc else None

    async def find_by_id_and_remove(self, person_id: str) -> Optional[Dict[str, Any]]:
        doc = await self._collection.find_one_and_delete({"_id": ObjectId(person_id)})
        return self._to_json(doc) if doc else None

    @staticmethod
    def _to_json(doc: Dict[str, Any]) -> Dict[str, Any]:
        """Copy ``doc`` with ``_id`` renamed to a string ``id``."""
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return data
