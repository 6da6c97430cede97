"""
Main entrypoint for the People API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``::

    uvicorn people_api.app.main:app --reload

The people service is built in the startup hook according to
``settings.people_backend`` and stored on ``app.state`` where the
``get_people_service`` dependency picks it up.
"""

import logging
from typing import Optional, Tuple

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import MongoManager
from .core.logging_config import setup_logging
from .dao.people_dao import PeopleDao
from .services.base import PeopleServiceProtocol
from .services.memory_people_service import MemoryPeopleService
from .services.people_service import PeopleService

logger = logging.getLogger(__name__)

BACKENDS = {"memory", "mongodb"}


async def build_people_service(
    config: Settings,
) -> Tuple[PeopleServiceProtocol, Optional[MongoManager]]:
    """Create the people service for ``config.people_backend``.

    Returns the service and, for the MongoDB backend, the manager owning
    the client so the caller can close it.  Raises ``ValueError`` for an
    unknown backend name.
    """
    backend = config.people_backend.lower()
    if backend not in BACKENDS:
        raise ValueError(
            f"Unknown PEOPLE_BACKEND '{config.people_backend}', expected one of {sorted(BACKENDS)}"
        )
    if backend == "memory":
        logger.info("Using in-memory people store")
        return MemoryPeopleService(), None

    mongo = MongoManager(config)
    await mongo.initialize()
    try:
        people_dao = PeopleDao(mongo.get_collection())
        await people_dao.ensure_indexes()
    except Exception:
        logger.error("MongoDB people store could not be prepared, closing client")
        await mongo.close()
        raise
    logger.info("Using MongoDB people store")
    return PeopleService(people_dao), mongo


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.people_service = None
    app.state.mongo = None

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        service, mongo = await build_people_service(config)
        app.state.people_service = service
        app.state.mongo = mongo

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.mongo is not None:
            await app.state.mongo.close()
            app.state.mongo = None
        app.state.people_service = None

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
