"""Entry point serving the People API with Uvicorn.

Host and port come from ``API_HOST`` and ``API_PORT`` (defaults
``0.0.0.0`` and ``8000``); storage and logging are configured through
the environment variables read by ``people_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from people_api.app.core.config import settings
from people_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("People API stopped")
