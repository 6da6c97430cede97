"""Dependencies shared by API routes."""

from fastapi import HTTPException, Request, status

from people_api.app.services.base import PeopleServiceProtocol


async def get_people_service(request: Request) -> PeopleServiceProtocol:
    """Return the people service built at application startup."""
    service = getattr(request.app.state, "people_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="People service is not initialised",
        )
    return service
