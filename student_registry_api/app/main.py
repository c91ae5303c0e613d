"""
Main entrypoint for the Student Registry API.

This module assembles the FastAPI application: it sets up logging,
opens the record store once for the lifetime of the process, registers
the error handlers and includes the JSON and HTML routers.  The
``create_app`` function builds the app, which is then instantiated at
module import time as ``app``::

    uvicorn student_registry_api.app.main:app --reload

The record routes are served both at ``/records`` and under the
versioned prefix ``/api/v1``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import StudentStore
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .web.routes import router as web_router


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment; tests pass their own to point at a
        temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.store = StudentStore.open(settings.database_url)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            app.state.store.close()
            logger.info("Student store closed")

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")
    # Unversioned alias used by the web page.
    app.include_router(v1_router, include_in_schema=False)
    app.include_router(web_router, include_in_schema=False)

    return app


app = create_app()
