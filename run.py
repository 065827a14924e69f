"""Entry point for the Book Directory API.

Starts the API with Uvicorn on the host and port taken from the
environment (``HOST``, ``PORT``; defaults ``0.0.0.0`` and ``3000``).
The collection file is configured with ``BOOKS_DATA_FILE``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from book_directory_api.app.core.config import settings
from book_directory_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
