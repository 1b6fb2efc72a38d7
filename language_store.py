"""Client side store for fetched language data.

The store keeps the most complete record known for every language id
and merges partial query results into it as they arrive.  It is a
keyed map (``id -> entry``) plus a list of known ids in the order they
were first seen; all lookups go through the id.

Merge policy, per field: a field present in the new payload replaces
the stored value, a field absent from the payload keeps the stored
value.  Merging is therefore idempotent, and when two payloads carry
the same field the one applied last wins.

Ids are normalized to ``int`` on the way in, so the string ids of
GraphQL ``ID`` fields and integer ids address the same entry.

The fetch actions talk to a :class:`~language_catalog_client.LanguageCatalogClient`
and only touch the store once a request has succeeded; a failed fetch
leaves it unchanged and returns the error to the caller.
"""

from __future__ import annotations

import copy
import logging
import re
import threading
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional

from language_catalog_client import LanguageCatalogClient


logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

LanguageEntry = Dict[str, Any]


def normalize_id(value: Any) -> int:
    """Return ``value`` as an integer id.

    Raises:
        ValueError: if ``value`` is not an integer or numeric string.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid language id: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value) if value is not None else ""
    if not _ID_RE.fullmatch(text):
        raise ValueError(f"Invalid language id: {value!r}")
    return int(text)


def merge_language(entry: Optional[Mapping[str, Any]], payload: Mapping[str, Any]) -> LanguageEntry:
    """Return a new entry with ``payload`` fields laid over ``entry``.

    Both inputs are deep copied, so nested values such as the
    ``frameworks`` list of dicts are never shared with the result.
    """
    merged: LanguageEntry = copy.deepcopy(dict(entry or {}))
    for key, value in payload.items():
        value = list(value) if isinstance(value, tuple) else value
        merged[key] = copy.deepcopy(value)
    return merged


class LanguageStore:
    """Thread‑safe, id keyed cache of language entries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._languages: Dict[int, LanguageEntry] = {}
        self._language_ids: List[int] = []

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def record_language_list(self, languages: Iterable[Mapping[str, Any]]) -> None:
        """Merge a list of partial languages, each keyed by its ``id`` field."""
        prepared = []
        for language in languages:
            language_id = normalize_id(language.get("id"))
            prepared.append((language_id, language))
        with self._lock:
            for language_id, language in prepared:
                self._merge(language_id, language)

    def record_language_detail(self, language_id: Any, data: Mapping[str, Any]) -> None:
        """Merge ``data`` into the entry for ``language_id``."""
        key = normalize_id(language_id)
        with self._lock:
            self._merge(key, data)

    def _merge(self, language_id: int, data: Mapping[str, Any]) -> None:
        if language_id not in self._languages:
            self._language_ids.append(language_id)
        merged = merge_language(self._languages.get(language_id), data)
        merged["id"] = language_id
        self._languages[language_id] = merged

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_by_id(self, language_id: Any) -> Optional[LanguageEntry]:
        """Return a copy of the entry for ``language_id``, or ``None``."""
        try:
            key = normalize_id(language_id)
        except ValueError:
            return None
        with self._lock:
            entry = self._languages.get(key)
            return merge_language(entry, {}) if entry is not None else None

    @property
    def language_ids(self) -> List[int]:
        with self._lock:
            return list(self._language_ids)

    def languages(self) -> List[LanguageEntry]:
        """Return copies of all entries in the order their ids were first seen."""
        with self._lock:
            return [merge_language(self._languages[i], {}) for i in self._language_ids]

    # ------------------------------------------------------------------
    # Fetch actions
    # ------------------------------------------------------------------
    def fetch_languages(self, client: LanguageCatalogClient) -> Optional[Dict[str, Any]]:
        """Fetch the language list and merge it.  Returns the error, if any."""
        started = time.perf_counter()
        languages, error = client.list_languages()
        if error:
            logger.warning("Fetching languages failed: %s", error.get("message"))
            return error
        self.record_language_list(languages)
        logger.debug(
            "fetch_languages: %d languages in %.1f ms",
            len(languages),
            (time.perf_counter() - started) * 1000,
        )
        return None

    def fetch_language(self, client: LanguageCatalogClient, language_id: Any) -> Optional[Dict[str, Any]]:
        """Fetch one language with its frameworks and merge it.

        An unknown id is reported as an error with ``status_code``
        ``None`` and leaves the store unchanged.
        """
        started = time.perf_counter()
        data, error = client.get_language(language_id)
        if error:
            logger.warning("Fetching language %s failed: %s", language_id, error.get("message"))
            return error
        if data is None:
            return {"status_code": None, "message": f"Language {language_id} not found"}
        self.record_language_detail(language_id, data)
        logger.debug(
            "fetch_language(%s) in %.1f ms",
            language_id,
            (time.perf_counter() - started) * 1000,
        )
        return None
