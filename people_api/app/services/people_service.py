"""
MongoDB backed people service.

``PeopleService`` composes a :class:`PeopleDao` and is responsible for
three things around every DAO call:

* translating storage failures: a duplicate key (code 11000, raised by
  the unique name index) becomes ``ConflictError``, anything else the
  driver or ``bson`` raises becomes ``UnprocessableError``;
* translating "nothing found" (``None`` from the DAO) into
  ``NotFoundError`` for single‑record operations;
* converting raw documents into ``PersonRead`` entities.

Names are compared case‑insensitively by the index collation, not by
this module.
"""

import logging
import random
from typing import List, Optional, Tuple

from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.exceptions import ConflictError, NotFoundError, UnprocessableError
from ..dao.people_dao import PeopleDao
from ..schemas.person import PersonCreate, PersonRead, PersonUpdate
from .base import PLACEHOLDER_BIRTH_DATE, PLACEHOLDER_PHOTO

logger = logging.getLogger(__name__)

DUPLICATE_KEY_CODE = 11000
STORAGE_ERRORS = (PyMongoError, InvalidId)


class PeopleService:
    """People service delegating storage to a :class:`PeopleDao`."""

    def __init__(self, people_dao: PeopleDao) -> None:
        self._people_dao = people_dao

    async def find_all(self) -> Optional[List[PersonRead]]:
        try:
            people = await self._people_dao.find()
        except STORAGE_ERRORS as e:
            raise self._unprocessable(e) from e
        if not people:
            return None
        return [PersonRead(**person) for person in people]

    async def find_random(self) -> Optional[PersonRead]:
        try:
            people = await self._people_dao.find()
        except STORAGE_ERRORS as e:
            raise self._unprocessable(e) from e
        if not people:
            return None
        return PersonRead(**random.choice(people))

    async def find_one(self, person_id: str) -> PersonRead:
        try:
            person = await self._people_dao.find_by_id(person_id)
        except STORAGE_ERRORS as e:
            raise self._unprocessable(e) from e
        if person is None:
            raise NotFoundError.for_id(person_id)
        return PersonRead(**person)

    async def create(self, person: PersonCreate) -> PersonRead:
        document = {
            "firstname": person.firstname,
            "lastname": person.lastname,
            "birthDate": PLACEHOLDER_BIRTH_DATE,
            "photo": PLACEHOLDER_PHOTO,
        }
        try:
            created = await self._people_dao.save(document)
        except STORAGE_ERRORS as e:
            raise self._translate(e, person.firstname, person.lastname) from e
        logger.info("Created person %s", created["id"])
        return PersonRead(**created)

    async def update(self, person_id: str, person: PersonUpdate) -> PersonRead:
        try:
            updated = await self._people_dao.find_by_id_and_update(person_id, person.changes())
        except DuplicateKeyError as e:
            firstname, lastname = await self._full_name(person_id, person)
            raise self._translate(e, firstname, lastname) from e
        except STORAGE_ERRORS as e:
            raise self._translate(e, person.firstname, person.lastname) from e
        if updated is None:
            raise NotFoundError.for_id(person_id)
        logger.info("Updated person %s", person_id)
        return PersonRead(**updated)

    async def delete(self, person_id: str) -> None:
        try:
            removed = await self._people_dao.find_by_id_and_remove(person_id)
        except STORAGE_ERRORS as e:
            raise self._unprocessable(e) from e
        if removed is None:
            raise NotFoundError.for_id(person_id)
        logger.info("Deleted person %s", person_id)

    async def _full_name(self, person_id: str, person: PersonUpdate) -> Tuple[str, str]:
        """Names sent in ``person``, completed from the stored document."""
        if person.firstname and person.lastname:
            return person.firstname, person.lastname
        try:
            current = await self._people_dao.find_by_id(person_id) or {}
        except STORAGE_ERRORS as e:
            raise self._unprocessable(e) from e
        return (
            person.firstname or current.get("firstname", ""),
            person.lastname or current.get("lastname", ""),
        )

    @staticmethod
    def _unprocessable(error: Exception) -> UnprocessableError:
        logger.warning("Storage operation failed: %s", error)
        return UnprocessableError(str(error))

    @classmethod
    def _translate(
        cls, error: Exception, firstname: Optional[str], lastname: Optional[str]
    ) -> Exception:
        if isinstance(error, DuplicateKeyError) or getattr(error, "code", None) == DUPLICATE_KEY_CODE:
            logger.warning("Duplicate person %s %s", firstname, lastname)
            return ConflictError.for_name(firstname or "", lastname or "")
        return cls._unprocessable(error)
