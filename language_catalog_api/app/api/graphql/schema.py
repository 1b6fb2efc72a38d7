"""
GraphQL schema: the ``Query`` root type.

Two read‑only fields are exposed::

    languages: [Language]
    getLanguage(id: ID!): Language

Resolvers delegate to the ``LanguageService`` found in the request
context (see :mod:`.router`).  There is no ``Mutation`` type.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from .types import LanguageType


@strawberry.type
class Query:
    @strawberry.field
    async def languages(self, info: Info) -> Optional[List[Optional[LanguageType]]]:
        records = await info.context["service"].list_languages()
        return [LanguageType.from_record(r) for r in records]

    @strawberry.field
    async def get_language(self, info: Info, id: strawberry.ID) -> Optional[LanguageType]:
        """Look up one language; unknown or non‑numeric ids resolve to null."""
        record = await info.context["service"].get_language(id)
        if record is None:
            return None
        return LanguageType.from_record(record)


schema = strawberry.Schema(query=Query)
