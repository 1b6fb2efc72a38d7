"""
Main entrypoint for the Language Catalog API.

This module assembles the FastAPI application: it sets up logging,
loads and validates the dataset, and mounts the GraphQL router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn language_catalog_api.app.main:app --reload

A dataset that fails validation raises ``DatasetError`` here, so a
broken catalog never starts serving.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, settings as default_settings
from .core.dataset import Dataset, load_dataset
from .core.logging_config import setup_logging
from .api.router import create_router
from .services.language_service import LanguageService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, dataset: Optional[Dataset] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment‑derived defaults.
    dataset : Optional[Dataset]
        Dataset to serve.  When omitted it is loaded according to
        ``settings.dataset_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so dataset loading below is visible.
    setup_logging(settings.log_level, settings.log_file or None)

    if dataset is None:
        dataset = load_dataset(settings.dataset_path or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.dataset = dataset
    app.state.language_service = LanguageService(dataset, response_delay_ms=settings.response_delay_ms)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.include_router(create_router(settings))

    logger.info("GraphQL endpoint mounted at %s", settings.graphql_path)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
