"""Local entry point for the Football Academy API.

Starts Uvicorn on ``HOST``/``PORT`` unless ``APP_ENV=production``, in
which case the hosting platform imports ``academy_api.app.main:app``
itself (see ``api/index.py``) and this script must not bind a port.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from academy_api.app.core.config import settings
from academy_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    if not settings.serve_locally:
        logging.getLogger(__name__).info(
            "APP_ENV=%s: listener is managed by the platform, not starting uvicorn",
            settings.environment,
        )
        return
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
