"""Entry point for the Event Registry API.

Starts the FastAPI application with Uvicorn.  Host, port and the other
settings are read from environment variables (see
``event_registry_api.app.core.config``).

The record store is held in process memory and is not safe for
concurrent callers, so the server always runs a single worker.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from event_registry_api.app.core.config import settings
from event_registry_api.app.main import app


def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        workers=1,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Event Registry API listening on %s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
