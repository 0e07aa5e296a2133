"""Entry point for the EPL backend API.

Serves ``epl_backend.app.main:app`` with Uvicorn.  Host, port, log
level and the database path are read from environment variables
(``HOST``, ``PORT``, ``LOG_LEVEL``, ``DATABASE_URL``); see
``epl_backend/app/core/config.py`` for the full list and defaults.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from epl_backend.app.core.config import settings
from epl_backend.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
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
        pass
