"""
FastAPI router serving the GraphQL schema.

POST requests execute queries; GET requests open the GraphiQL
explorer when it is enabled.  The ``LanguageService`` is taken from
``app.state`` on every request and handed to resolvers through the
context dictionary.
"""

from typing import Any, Dict

from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from language_catalog_api.app.services.language_service import LanguageService
from .schema import schema


async def get_context(request: Request) -> Dict[str, Any]:
    service: LanguageService = request.app.state.language_service
    return {"service": service}


def create_graphql_router(*, graphiql_enabled: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql_enabled else None,
    )
