"""
Static reference data for the catalog.

The dataset is two small collections, frameworks and languages, that
reference frameworks by id.  It is built once when the application is
created and then only read, so it can be shared by every request
without locking.

Integrity is checked up front: duplicate ids or an id in
``frameworksById``/``similarById`` that names no framework reject the
whole dataset with :class:`DatasetError`.  A broken reference is a data
bug and should stop the service from starting rather than show up as a
``null`` inside a list at query time.

The built‑in data can be replaced by a JSON file of the form::

    {"frameworks": [{"id": 1, "name": "Vue", "similarById": [2]}],
     "languages": [{"id": 1, "name": "JavaScript", "frameworksById": [1]}]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from language_catalog_api.app.schemas.catalog import Framework, Language


logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Raised when the catalog data is malformed or inconsistent."""


class DanglingReferenceError(DatasetError):
    """Raised when a record references a framework id that does not exist."""

    def __init__(self, owner: str, framework_id: int) -> None:
        super().__init__(f"{owner} references unknown framework id {framework_id}")
        self.owner = owner
        self.framework_id = framework_id


FRAMEWORKS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Vue", "similarById": [2, 4]},
    {"id": 2, "name": "React", "similarById": [1, 5]},
    {"id": 3, "name": "Ember", "similarById": [4]},
    {"id": 4, "name": "Angular", "similarById": [1, 3]},
    {"id": 5, "name": "Preact", "similarById": 2},
    {"id": 6, "name": "Rails", "similarById": [8]},
    {"id": 7, "name": "Phoenix", "similarById": [6]},
    {"id": 8, "name": "Laravel", "similarById": [6]},
]

LANGUAGES: List[Dict[str, Any]] = [
    {"id": 1, "name": "JavaScript", "frameworksById": [1, 2, 3, 4, 5]},
    {"id": 2, "name": "Ruby", "frameworksById": [6]},
    {"id": 3, "name": "Elixir", "frameworksById": [7]},
    {"id": 4, "name": "PHP", "frameworksById": [8]},
]


class Dataset:
    """Immutable, id‑indexed view over languages and frameworks."""

    def __init__(self, languages: Iterable[Language], frameworks: Iterable[Framework]) -> None:
        self._languages: Tuple[Language, ...] = tuple(languages)
        self._frameworks: Tuple[Framework, ...] = tuple(frameworks)
        self._frameworks_by_id = self._index(self._frameworks, "framework")
        self._languages_by_id = self._index(self._languages, "language")
        self._check_references()

    @classmethod
    def from_records(
        cls,
        *,
        languages: Iterable[Mapping[str, Any]],
        frameworks: Iterable[Mapping[str, Any]],
    ) -> "Dataset":
        """Build a dataset from plain dictionaries.

        Raises:
            DatasetError: if a record fails validation or the records
                are inconsistent.
        """
        try:
            framework_records = [Framework.model_validate(item) for item in frameworks]
            language_records = [Language.model_validate(item) for item in languages]
        except ValidationError as exc:
            raise DatasetError(f"Invalid catalog record: {exc}") from exc
        return cls(language_records, framework_records)

    @staticmethod
    def _index(records: Tuple[Any, ...], kind: str) -> Dict[int, Any]:
        index: Dict[int, Any] = {}
        for record in records:
            if record.id in index:
                raise DatasetError(f"Duplicate {kind} id {record.id}")
            index[record.id] = record
        return index

    def _check_references(self) -> None:
        for language in self._languages:
            for framework_id in language.frameworks_by_id:
                if framework_id not in self._frameworks_by_id:
                    raise DanglingReferenceError(f"Language {language.id}", framework_id)
        for framework in self._frameworks:
            for framework_id in framework.similar_by_id:
                if framework_id not in self._frameworks_by_id:
                    raise DanglingReferenceError(f"Framework {framework.id}", framework_id)

    @property
    def languages(self) -> Tuple[Language, ...]:
        return self._languages

    @property
    def frameworks(self) -> Tuple[Framework, ...]:
        return self._frameworks

    def find_framework(self, framework_id: int) -> Optional[Framework]:
        return self._frameworks_by_id.get(framework_id)

    def find_language(self, language_id: int) -> Optional[Language]:
        return self._languages_by_id.get(language_id)

    def resolve_frameworks_of(self, language: Language) -> List[Framework]:
        """Return the frameworks of ``language`` in ``frameworks_by_id`` order.

        Raises:
            DanglingReferenceError: if an id does not resolve.  Datasets
                built by this class are checked on construction, so this
                only fires for a ``Language`` that did not come from it.
        """
        resolved: List[Framework] = []
        for framework_id in language.frameworks_by_id:
            framework = self.find_framework(framework_id)
            if framework is None:
                raise DanglingReferenceError(f"Language {language.id}", framework_id)
            resolved.append(framework)
        return resolved


def load_dataset(path: Optional[str] = None) -> Dataset:
    """Return the built‑in dataset, or one read from the JSON file at ``path``."""
    if not path:
        dataset = Dataset.from_records(languages=LANGUAGES, frameworks=FRAMEWORKS)
        logger.info(
            "Loaded built-in dataset: %d languages, %d frameworks",
            len(dataset.languages),
            len(dataset.frameworks),
        )
        return dataset

    file_path = Path(path).resolve()
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise DatasetError(f"Cannot read dataset file {file_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise DatasetError(f"Dataset file {file_path} must contain a JSON object")

    languages = payload.get("languages", [])
    frameworks = payload.get("frameworks", [])
    if not isinstance(languages, list) or not isinstance(frameworks, list):
        raise DatasetError(f"Dataset file {file_path}: 'languages' and 'frameworks' must be arrays")

    dataset = Dataset.from_records(languages=languages, frameworks=frameworks)
    logger.info(
        "Loaded dataset from %s: %d languages, %d frameworks",
        file_path,
        len(dataset.languages),
        len(dataset.frameworks),
    )
    return dataset
