"""Entry point for the User Management API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are taken from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``user_management_api/app/core/config.py`` for all settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_management_api.app.core.config import settings
from user_management_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
