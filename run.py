"""Entry point for the Exercise Tracker API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as PORT, DATABASE_URL and LOG_LEVEL is read from
environment variables, see ``exercise_tracker_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import create_app


logger = logging.getLogger(__name__)


async def announce_when_started(server: Server, port: int, poll_interval: float = 0.05) -> bool:
    """Log the listening port once ``server`` has bound its socket.

    Returns ``False`` without logging if the server gives up before it
    starts, e.g. because the port is taken.
    """
    while not server.started:
        if server.should_exit:
            return False
        await asyncio.sleep(poll_interval)
    logger.info("Your app is listening on port %s", port)
    return True


async def main() -> None:
    """Start the API using Uvicorn on ``settings.host:settings.port``."""
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    announcer = asyncio.create_task(announce_when_started(server, settings.port))
    try:
        await server.serve()
    finally:
        announcer.cancel()
        await asyncio.gather(announcer, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
