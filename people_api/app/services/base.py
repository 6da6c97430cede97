"""Interface and helpers shared by the people services."""

from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from ..schemas.person import PersonCreate, PersonRead, PersonUpdate

PLACEHOLDER_PHOTO = "https://randomuser.me/api/portraits/lego/6.jpg"


def parse_date(date: str) -> datetime:
    """Parse a day‑first ``dd/mm/yyyy`` string."""
    return datetime.strptime(date, "%d/%m/%Y")


PLACEHOLDER_BIRTH_DATE = parse_date("06/05/1985")


@runtime_checkable
class PeopleServiceProtocol(Protocol):
    """Public surface of a people service.

    Every method raises a ``PeopleError`` subclass on failure:
    ``NotFoundError`` for an unknown id, ``ConflictError`` for a
    duplicate firstname/lastname pair and, for storage backed services,
    ``UnprocessableError`` for any other storage failure.
    """

    async def find_all(self) -> Optional[List[PersonRead]]:
        """All people, or ``None`` when there are none."""
        ...

    async def find_random(self) -> Optional[PersonRead]:
        """One person picked at random, or ``None`` when there are none."""
        ...

    async def find_one(self, person_id: str) -> PersonRead:
        ...

    async def create(self, person: PersonCreate) -> PersonRead:
        """Store a new person with placeholder birth date and photo."""
        ...

    async def update(self, person_id: str, person: PersonUpdate) -> PersonRead:
        """Merge the fields sent in ``person`` into the stored record."""
        ...

    async def delete(self, person_id: str) -> None:
        ...
