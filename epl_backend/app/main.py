"""
Main entrypoint for the EPL backend API.

This module assembles the FastAPI application: it sets up logging,
registers the error handler and includes the versioned routers.  The
application state (database, id allocator and entity stores) is opened
when the app starts up and closed when it shuts down, so building the
app touches no database.  The app is instantiated at module import
time as ``app`` so that it can be served directly, e.g.::

    uvicorn epl_backend.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import RecordError, StorageError
from .core.logging_config import setup_logging
from .core.state import AppState


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.  Tests
        pass their own to point the app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  While it is running,
        its ``AppState`` is available as ``app.state.records``.
    """
    app_settings = app_settings or settings
    # Initialise logging first so that migration messages emitted at
    # startup use the configured format.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # A fresh state per startup: the same app may be started again
        # after a shutdown closed the previous connection.
        app.state.records = AppState.open(app_settings.database_url)
        try:
            yield
        finally:
            app.state.records.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logging.getLogger(__name__).error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
