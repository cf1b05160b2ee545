"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn or another ASGI server,
e.g.::

    uvicorn user_management_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.endpoints import info
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import DataStore, get_store, init_db
from .core.logging_config import setup_logging


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DataStore]
        Store to serve instead of the process-wide one.  When given,
        startup leaves it untouched; otherwise the process-wide store
        is recreated and seeded on every startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that module loggers used below are configured.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(info.router, tags=["info"])
    app.include_router(v1_router, prefix="/api/v1")

    if store is not None:
        app.dependency_overrides[get_store] = lambda: store
    else:
        @app.on_event("startup")
        async def startup_event() -> None:
            init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
