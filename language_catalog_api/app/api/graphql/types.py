"""
Strawberry output types for languages and frameworks.

``LanguageType`` keeps its record as a private attribute.  Scalar
fields are copied eagerly; ``Language.frameworks`` is a resolver, so
framework records are looked up only for queries that select it.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from language_catalog_api.app.schemas.catalog import Framework, Language


@strawberry.type(name="Framework")
class FrameworkType:
    id: strawberry.ID
    name: Optional[str]
    similar_by_id: Optional[List[strawberry.ID]]

    @classmethod
    def from_record(cls, record: Framework) -> "FrameworkType":
        return cls(
            id=strawberry.ID(str(record.id)),
            name=record.name,
            similar_by_id=[strawberry.ID(str(x)) for x in record.similar_by_id],
        )


@strawberry.type(name="Language")
class LanguageType:
    id: strawberry.ID
    name: str
    frameworks_by_id: Optional[List[Optional[strawberry.ID]]]
    record: strawberry.Private[Language]

    @strawberry.field
    def frameworks(self, info: Info) -> Optional[List[Optional[FrameworkType]]]:
        service = info.context["service"]
        return [FrameworkType.from_record(f) for f in service.resolve_frameworks_of(self.record)]

    @classmethod
    def from_record(cls, record: Language) -> "LanguageType":
        return cls(
            id=strawberry.ID(str(record.id)),
            name=record.name,
            frameworks_by_id=[strawberry.ID(str(x)) for x in record.frameworks_by_id],
            record=record,
        )
