"""
Main entrypoint for the Event Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn event_registry_api.app.main:app

The record store and id generator live on ``app.state``.  Handlers are
``async def`` functions that call the synchronous services directly,
so every query and mutation runs to completion on the event loop
thread before the next one starts.  Do not move service calls into a
thread pool or run more than one worker process: the store has no
locking and each worker would hold its own copy of the data.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.dataset import load_dataset
from .core.ids import IdGenerator
from .core.logging_config import setup_logging
from .core.store import RecordStore


def create_app(
    store: Optional[RecordStore] = None,
    settings: Optional[Settings] = None,
    ids: Optional[IdGenerator] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Store to serve.  When omitted, the dataset at
        ``settings.data_path`` is loaded during application startup.
    settings : Optional[Settings]
        Configuration; defaults to the module-level settings.
    ids : Optional[IdGenerator]
        Identifier generator for created records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "store", None) is None:
            app.state.store = load_dataset(settings.data_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.ids = ids or IdGenerator()

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
