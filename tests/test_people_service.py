import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from people_api.app.core.exceptions import ConflictError, NotFoundError, UnprocessableError
from people_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from people_api.app.services.base import (
    PLACEHOLDER_BIRTH_DATE,
    PLACEHOLDER_PHOTO,
    PeopleServiceProtocol,
)


def jane(**overrides):
    return PersonCreate(**{"firstname": "Jane", "lastname": "Doe", **overrides})


def test_service_implements_protocol(people_service):
    assert isinstance(people_service, PeopleServiceProtocol)


@pytest.mark.asyncio
async def test_find_all_and_random_on_empty_collection(people_service):
    assert await people_service.find_all() is None
    assert await people_service.find_random() is None


@pytest.mark.asyncio
async def test_create_overwrites_birth_date_and_photo(people_service):
    created = await people_service.create(
        jane(birthDate="2001-01-01T00:00:00", photo="https://example.com/me.jpg")
    )

    assert isinstance(created, PersonRead)
    assert created.photo == PLACEHOLDER_PHOTO
    assert created.birth_date == PLACEHOLDER_BIRTH_DATE


@pytest.mark.asyncio
async def test_create_then_find_one_round_trip(people_service):
    created = await people_service.create(jane())

    assert await people_service.find_one(created.id) == created


@pytest.mark.asyncio
async def test_create_duplicate_name_is_conflict(people_service):
    await people_service.create(jane())

    with pytest.raises(ConflictError) as excinfo:
        await people_service.create(jane(firstname="JANE", lastname="doe"))

    assert excinfo.value.status_code == 409
    assert "lastname 'doe' and firstname 'JANE'" in excinfo.value.message


@pytest.mark.asyncio
async def test_find_all_and_random_return_entities(people_service):
    first = await people_service.create(jane())
    second = await people_service.create(jane(firstname="John"))

    assert await people_service.find_all() == [first, second]
    assert await people_service.find_random() in (first, second)


@pytest.mark.asyncio
async def test_unknown_id_is_not_found(people_service):
    missing = str(ObjectId())

    with pytest.raises(NotFoundError):
        await people_service.find_one(missing)
    with pytest.raises(NotFoundError):
        await people_service.update(missing, PersonUpdate(lastname="Smith"))
    with pytest.raises(NotFoundError) as excinfo:
        await people_service.delete(missing)
    assert excinfo.value.message == f"People with id '{missing}' not found"


@pytest.mark.asyncio
async def test_malformed_id_is_unprocessable(people_service):
    with pytest.raises(UnprocessableError) as excinfo:
        await people_service.find_one("42")

    assert excinfo.value.status_code == 422


@pytest.mark.asyncio
async def test_update_merges_only_provided_fields(people_service):
    created = await people_service.create(jane())

    updated = await people_service.update(created.id, PersonUpdate(lastname="Smith"))

    assert updated.firstname == "Jane"
    assert updated.lastname == "Smith"
    assert updated.photo == PLACEHOLDER_PHOTO
    assert await people_service.find_one(created.id) == updated


@pytest.mark.asyncio
async def test_update_with_own_name_succeeds(people_service):
    created = await people_service.create(jane())

    updated = await people_service.update(
        created.id, PersonUpdate(firstname="jane", lastname="DOE")
    )

    assert updated.firstname == "jane"


@pytest.mark.asyncio
async def test_update_to_other_persons_name_is_conflict(people_service):
    await people_service.create(jane())
    john = await people_service.create(jane(firstname="John"))

    with pytest.raises(ConflictError):
        await people_service.update(john.id, PersonUpdate(firstname="Jane"))


@pytest.mark.asyncio
async def test_delete_removes_person(people_service):
    created = await people_service.create(jane())

    assert await people_service.delete(created.id) is None
    assert await people_service.find_all() is None


@pytest.mark.asyncio
async def test_storage_failures_are_unprocessable(people_service, collection):
    collection.fail_with = ServerSelectionTimeoutError("localhost:27017: connection refused")

    with pytest.raises(UnprocessableError):
        await people_service.find_all()
    with pytest.raises(UnprocessableError):
        await people_service.find_random()
    with pytest.raises(UnprocessableError):
        await people_service.create(jane())
    with pytest.raises(UnprocessableError):
        await people_service.update(str(ObjectId()), PersonUpdate(lastname="Smith"))
    with pytest.raises(UnprocessableError) as excinfo:
        await people_service.delete(str(ObjectId()))
    assert "connection refused" in excinfo.value.message


@pytest.mark.asyncio
async def test_partial_update_conflict_reports_full_name(people_service):
    await people_service.create(jane())
    john = await people_service.create(jane(firstname="John"))

    with pytest.raises(ConflictError) as excinfo:
        await people_service.update(john.id, PersonUpdate(firstname="Jane"))

    assert excinfo.value.message == (
        "People with lastname 'Doe' and firstname 'Jane' already exists"
    )
