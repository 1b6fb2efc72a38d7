"""
Service layer for the language catalog.

``LanguageService`` answers the two read queries of the API against a
:class:`~language_catalog_api.app.core.dataset.Dataset`.  The dataset is
passed in at construction and never modified, so one service instance
is shared by all requests.

Framework resolution is exposed separately through
:meth:`LanguageService.resolve_frameworks_of` so the GraphQL layer only
performs it when a query actually selects ``frameworks``.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from typing import Any, List, Optional

from language_catalog_api.app.core.dataset import Dataset
from language_catalog_api.app.schemas.catalog import Framework, Language


logger = logging.getLogger(__name__)

# ASCII digits only; ``int()`` alone would also take "0_1" or Arabic‑Indic digits.
_ID_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_id(value: Any) -> Optional[int]:
    """Parse a GraphQL ``ID`` into an integer, or ``None`` if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    text = str(value)
    if not _ID_RE.fullmatch(text):
        return None
    return int(text)


class LanguageService:
    """Read‑only queries over the catalog dataset."""

    def __init__(self, dataset: Dataset, *, response_delay_ms: int = 0) -> None:
        self.dataset = dataset
        self.response_delay_ms = response_delay_ms

    async def list_languages(self) -> List[Language]:
        """Return every language in declaration order."""
        started = time.perf_counter()
        if self.response_delay_ms > 0:
            await asyncio.sleep(self.response_delay_ms / 1000)
        languages = list(self.dataset.languages)
        logger.debug(
            "list_languages returned %d records in %.2f ms",
            len(languages),
            (time.perf_counter() - started) * 1000,
        )
        return languages

    async def get_language(self, language_id: Any) -> Optional[Language]:
        """Return the language with the given id.

        ``language_id`` may be a string as received from GraphQL.  Ids
        that are not numeric are reported as not found.
        """
        started = time.perf_counter()
        parsed = parse_id(language_id)
        language = self.dataset.find_language(parsed) if parsed is not None else None
        if parsed is None:
            logger.info("getLanguage called with non-numeric id %r", language_id)
        logger.debug(
            "get_language(%r) %s in %.2f ms",
            language_id,
            "found" if language else "not found",
            (time.perf_counter() - started) * 1000,
        )
        return language

    def resolve_frameworks_of(self, language: Language) -> List[Framework]:
        return self.dataset.resolve_frameworks_of(language)
