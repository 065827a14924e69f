"""
Main entrypoint for the Book Directory API.

This module assembles the FastAPI application: it sets up logging,
prepares the collection file, binds a ``BookService`` to the app and
includes the API router.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so
it can be served with::

    uvicorn book_directory_api.app.main:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import BookStorage
from .api.router import router as api_router
from .services.book_service import BookService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment; tests pass their own to point the service at a
        temporary data file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    storage = BookStorage(settings.data_file, use_lock=settings.use_lock)
    storage.initialize()
    app.state.settings = settings
    app.state.book_service = BookService(storage)

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok", "service": settings.project_name}

    return app


app = create_app()
