"""
People endpoints for API v1.

Thin handlers over ``PeopleServiceProtocol``: each one calls the service
and turns a ``PeopleError`` into an ``HTTPException`` carrying the
error's status code (404, 409 or 422).  Listing and random selection
answer ``204 No Content`` when the store is empty.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from people_api.app.api.dependencies import get_people_service
from people_api.app.core.exceptions import PeopleError
from people_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from people_api.app.services.base import PeopleServiceProtocol

router = APIRouter()


def _http_error(error: PeopleError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.get("", response_model=List[PersonRead], include_in_schema=False)
@router.get("/", response_model=List[PersonRead])
async def list_people(service: PeopleServiceProtocol = Depends(get_people_service)):
    """Return every person, or 204 if there is none."""
    try:
        people = await service.find_all()
    except PeopleError as e:
        raise _http_error(e) from e
    if people is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return people


@router.get("/random", response_model=PersonRead)
async def get_random_person(service: PeopleServiceProtocol = Depends(get_people_service)):
    """Return one person chosen at random, or 204 if there is none."""
    try:
        person = await service.find_random()
    except PeopleError as e:
        raise _http_error(e) from e
    if person is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return person


@router.get("/{person_id}", response_model=PersonRead)
async def get_person(
    person_id: str,
    service: PeopleServiceProtocol = Depends(get_people_service),
) -> PersonRead:
    try:
        return await service.find_one(person_id)
    except PeopleError as e:
        raise _http_error(e) from e


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def create_person(
    person: PersonCreate,
    service: PeopleServiceProtocol = Depends(get_people_service),
) -> PersonRead:
    """Create a person.

    The birth date and photo of the new person are always set to
    placeholder values, whatever the request contains.
    """
    try:
        return await service.create(person)
    except PeopleError as e:
        raise _http_error(e) from e


@router.put("/{person_id}", response_model=PersonRead)
@router.patch("/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: str,
    person: PersonUpdate,
    service: PeopleServiceProtocol = Depends(get_people_service),
) -> PersonRead:
    """Update a person; fields missing from the body are left unchanged."""
    try:
        return await service.update(person_id, person)
    except PeopleError as e:
        raise _http_error(e) from e


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: str,
    service: PeopleServiceProtocol = Depends(get_people_service),
) -> None:
    try:
        await service.delete(person_id)
    except PeopleError as e:
        raise _http_error(e) from e
    return None
