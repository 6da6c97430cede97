"""
In‑memory people service.

Records live in a list owned by the service instance and are seeded from
``app/data/people.py``.  Nothing is persisted and there is no locking;
the service is meant for a single process with light traffic.
"""

import logging
import random
import time
from typing import Any, Dict, Iterable, List, Optional

from ..core.exceptions import ConflictError, NotFoundError
from ..data.people import PEOPLE
from ..schemas.person import PersonCreate, PersonRead, PersonUpdate
from .base import PLACEHOLDER_BIRTH_DATE, PLACEHOLDER_PHOTO, parse_date

logger = logging.getLogger(__name__)


class MemoryPeopleService:
    """People service backed by a Python list."""

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        source = PEOPLE if seed is None else seed
        self._people: List[Dict[str, Any]] = [
            {**person, "birthDate": parse_date(person["birthDate"])}
            if isinstance(person["birthDate"], str)
            else dict(person)
            for person in source
        ]

    async def find_all(self) -> Optional[List[PersonRead]]:
        if not self._people:
            return None
        return [PersonRead(**person) for person in self._people]

    async def find_random(self) -> Optional[PersonRead]:
        if not self._people:
            return None
        return PersonRead(**random.choice(self._people))

    async def find_one(self, person_id: str) -> PersonRead:
        index = self._index_of(person_id)
        if index is None:
            raise NotFoundError.for_id(person_id)
        return PersonRead(**self._people[index])

    async def create(self, person: PersonCreate) -> PersonRead:
        if self._name_taken(person.firstname, person.lastname):
            raise ConflictError.for_name(person.firstname, person.lastname)
        record = {
            "id": self._create_id(),
            "firstname": person.firstname,
            "lastname": person.lastname,
            "birthDate": PLACEHOLDER_BIRTH_DATE,
            "photo": PLACEHOLDER_PHOTO,
        }
        self._people.append(record)
        logger.info("Created person %s", record["id"])
        return PersonRead(**record)

    async def update(self, person_id: str, person: PersonUpdate) -> PersonRead:
        index = self._index_of(person_id)
        current = self._people[index] if index is not None else {}
        firstname = person.firstname or current.get("firstname")
        lastname = person.lastname or current.get("lastname")
        # The name check runs before the id lookup fails.
        if firstname and lastname and self._name_taken(firstname, lastname, exclude_id=person_id):
            raise ConflictError.for_name(firstname, lastname)
        if index is None:
            raise NotFoundError.for_id(person_id)
        self._people[index].update(person.changes())
        logger.info("Updated person %s", person_id)
        return PersonRead(**self._people[index])

    async def delete(self, person_id: str) -> None:
        index = self._index_of(person_id)
        if index is None:
            raise NotFoundError.for_id(person_id)
        del self._people[index]
        logger.info("Deleted person %s", person_id)

    def _index_of(self, person_id: str) -> Optional[int]:
        for index, person in enumerate(self._people):
            if person["id"] == person_id:
                return index
        return None

    def _name_taken(self, firstname: str, lastname: str, exclude_id: Optional[str] = None) -> bool:
        """Case‑insensitive name lookup, skipping the record ``exclude_id``."""
        firstname, lastname = firstname.lower(), lastname.lower()
        excluded = exclude_id.lower() if exclude_id is not None else None
        return any(
            person["firstname"].lower() == firstname
            and person["lastname"].lower() == lastname
            and person["id"].lower() != excluded
            for person in self._people
        )

    def _create_id(self) -> str:
        """Timestamp based id, bumped until unused."""
        stamp = time.time_ns()
        while self._index_of(str(stamp)) is not None:
            stamp += 1
        return str(stamp)
