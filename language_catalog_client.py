"""Language catalog API client.

This module defines a small client for the GraphQL endpoint served by
``language_catalog_api``.  It uses the ``requests`` library and sends
every query as a JSON ``POST`` to a single URL.

The client exposes one method per query used by the viewer:

* :meth:`LanguageCatalogClient.list_languages` – id and name of every language.
* :meth:`LanguageCatalogClient.get_language` – one language with its frameworks.

Like the rest of the tooling, methods never raise on transport
problems.  They return a tuple ``(data, error)`` where ``error`` is
``None`` on success and otherwise a dictionary with ``status_code``
and ``message`` keys.  GraphQL level errors (a response carrying an
``errors`` array) are reported the same way.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:5000/graphql"

LANGUAGES_QUERY = """
query Languages {
  languages {
    id
    name
  }
}
"""

GET_LANGUAGE_QUERY = """
query GetLanguage($id: ID!) {
  getLanguage(id: $id) {
    id
    name
    frameworks {
      id
      name
      similarById
    }
  }
}
"""

Error = Dict[str, Any]


class LanguageCatalogClient:
    """Client for the language catalog GraphQL endpoint."""

    def __init__(
        self,
        *,
        url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            url: Full URL of the GraphQL endpoint.  Defaults to the
                ``LANGUAGE_CATALOG_URL`` environment variable, then to
                ``http://localhost:5000/graphql``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.url = url or os.getenv("LANGUAGE_CATALOG_URL", DEFAULT_URL)
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level helpers
    # ------------------------------------------------------------------
    def query(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Execute a GraphQL query.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the ``data`` member of
            the GraphQL response on success.
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables
        try:
            logger.debug("Sending GraphQL query to %s", self.url)
            response = self.session.post(self.url, json=body, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("GraphQL request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("GraphQL request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("GraphQL response is not valid JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            message = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            logger.error("GraphQL query returned errors: %s", message)
            return None, {"status_code": response.status_code, "message": message}
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            return None, {"status_code": response.status_code, "message": "Response has no data"}
        return data, None

    # ------------------------------------------------------------------
    # Catalog queries
    # ------------------------------------------------------------------
    def list_languages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the id and name of every language.

        Returns:
            A tuple ``(languages, error)``.  ``languages`` is empty on
            failure.
        """
        data, error = self.query(LANGUAGES_QUERY)
        if error:
            return [], error
        languages = data.get("languages") or []
        return [lang for lang in languages if lang is not None], None

    def get_language(self, language_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one language with its frameworks.

        Returns:
            A tuple ``(language, error)``.  ``language`` is ``None`` both
            on failure and when the id is unknown; check ``error`` to
            tell the two apart.
        """
        data, error = self.query(GET_LANGUAGE_QUERY, {"id": str(language_id)})
        if error:
            return None, error
        return data.get("getLanguage"), None
