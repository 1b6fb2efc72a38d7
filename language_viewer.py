#!/usr/bin/env python3
"""
Command line viewer for the language catalog.

Lists the known languages and, when a language id is given, renders
that language's frameworks together with the frameworks similar to
each one.  Data is fetched through :class:`LanguageCatalogClient` and
read back from a :class:`LanguageStore`, the same way a browser
frontend would render from its client side store.

Usage:
    python language_viewer.py                 # list languages
    python language_viewer.py 1               # show JavaScript's frameworks
    python language_viewer.py 1 --url http://localhost:5000/graphql
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from language_catalog_api.app.core.logging_config import setup_logging
from language_catalog_client import LanguageCatalogClient
from language_store import LanguageEntry, LanguageStore


logger = logging.getLogger(__name__)


def render_language_list(store: LanguageStore) -> List[str]:
    return [f"{entry['id']:>3}  {entry.get('name', '?')}" for entry in store.languages()]


def render_language(entry: LanguageEntry) -> List[str]:
    """Render a language entry and its frameworks as lines of text."""
    lines = [f"{entry.get('name', '?')} (id {entry['id']})"]
    frameworks: List[Optional[Dict[str, Any]]] = entry.get("frameworks") or []
    if not frameworks:
        lines.append("  no frameworks")
        return lines
    names = {str(f["id"]): f.get("name") for f in frameworks if f}
    for framework in frameworks:
        if not framework:
            continue
        similar = [names.get(str(i)) or f"#{i}" for i in framework.get("similarById") or []]
        line = f"  - {framework.get('name')}"
        if similar:
            line += f" (similar: {', '.join(similar)})"
        lines.append(line)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Browse languages and their frameworks.")
    ap.add_argument("language_id", nargs="?", help="Language id to show frameworks for")
    ap.add_argument("--url", help="GraphQL endpoint URL (default: $LANGUAGE_CATALOG_URL)")
    ap.add_argument("--log-level", default="WARNING", help="Logging level, e.g. DEBUG for timings")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    client = LanguageCatalogClient(url=args.url)
    store = LanguageStore()

    error = store.fetch_languages(client)
    if error:
        print(f"[!] Could not load languages: {error['message']}", file=sys.stderr)
        return 1

    if args.language_id is None:
        print("\n".join(render_language_list(store)))
        return 0

    error = store.fetch_language(client, args.language_id)
    if error:
        print(f"[!] {error['message']}", file=sys.stderr)
        return 1
    entry = store.get_by_id(args.language_id)
    print("\n".join(render_language(entry)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
