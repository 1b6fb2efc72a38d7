"""
Top‑level router for the API.

The catalog has a single transport, GraphQL, mounted under
``settings.graphql_path``.  New transports would be included here.
"""

from fastapi import APIRouter

from language_catalog_api.app.core.config import Settings
from .graphql.router import create_graphql_router


def create_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(
        create_graphql_router(graphiql_enabled=settings.graphiql_enabled),
        prefix=settings.graphql_path,
        tags=["graphql"],
    )
    return router
