"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload

The database is opened when the application starts, migrated, exposed
as ``app.state.db`` and closed again on shutdown.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import (
    ServiceError,
    request_validation_handler,
    service_error_handler,
    unhandled_error_handler,
)
from .core.logging_config import setup_logging

APP_DIR = Path(__file__).resolve().parent
VIEWS_DIR = APP_DIR / "views"
PUBLIC_DIR = APP_DIR / "public"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open and migrate the database for the lifetime of the app."""
    db: Database = app.state.db
    await db.open()
    await db.migrate()
    try:
        yield
    finally:
        await db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  Its database is
        not opened until the application starts.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url)

    origins = settings.allowed_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix="/api")
    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        """Serve the landing page with forms for the API."""
        return FileResponse(VIEWS_DIR / "index.html")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
