"""
Main entrypoint for the Identity API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn identity_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.exceptions import StoreError
from .core.logging_config import setup_logging
from .core.store import Store

logger = logging.getLogger(__name__)


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or mistyped payloads with 400 instead of 422."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid request"})


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


def create_app(store: Optional[Store] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[Store]
        Store to serve from.  A new one is created when omitted.
        Defaults are seeded into it when ``settings.seed_defaults`` is
        true.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log from the start.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.state.store = store if store is not None else Store()
    if settings.seed_defaults:
        app.state.store.seed_defaults()

    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    app.add_exception_handler(StoreError, store_error_handler)

    # Routes are served at the root unless API_PREFIX is set
    # (e.g. "/api/v1").
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
