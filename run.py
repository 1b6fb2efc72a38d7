"""Entry point for serving the Language Catalog API.

Starts uvicorn with the FastAPI application from
``language_catalog_api.app.main``.  Host and port come from the
``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``5000``); see ``language_catalog_api/app/core/config.py``
for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from language_catalog_api.app.core.config import settings
from language_catalog_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving GraphQL on http://%s:%s%s", settings.host, settings.port, settings.graphql_path
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
