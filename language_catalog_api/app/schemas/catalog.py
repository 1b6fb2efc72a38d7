"""
Pydantic records for languages and frameworks.

Both records are frozen: the dataset is built once at start up and
never mutated afterwards.  Input may use either the camelCase field
names exposed over GraphQL (``frameworksById``) or the snake_case
attribute names.
"""

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Framework(BaseModel):
    """A software framework and the ids of frameworks similar to it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    similar_by_id: Tuple[int, ...] = Field(default_factory=tuple, alias="similarById")

    @field_validator("similar_by_id", mode="before")
    @classmethod
    def normalize_similar(cls, v: Any) -> List[Any]:
        # Older data stores a single id instead of a list.
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        return [v]


class Language(BaseModel):
    """A programming language and the ids of its frameworks, in display order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    frameworks_by_id: Tuple[int, ...] = Field(default_factory=tuple, alias="frameworksById")
