# tests/test_language_viewer.py
from unittest.mock import MagicMock, patch

import requests

import language_viewer
from language_catalog_client import LanguageCatalogClient
from language_store import LanguageStore


def test_render_language_list():
    store = LanguageStore()
    store.record_language_list([{"id": "1", "name": "JavaScript"}, {"id": "2", "name": "Ruby"}])
    assert language_viewer.render_language_list(store) == ["  1  JavaScript", "  2  Ruby"]


def test_render_language_resolves_similar_names():
    entry = {
        "id": 1,
        "name": "JavaScript",
        "frameworks": [
            {"id": "1", "name": "Vue", "similarById": ["2", "4"]},
            {"id": "2", "name": "React", "similarById": ["1"]},
        ],
    }
    assert language_viewer.render_language(entry) == [
        "JavaScript (id 1)",
        "  - Vue (similar: React, #4)",
        "  - React (similar: Vue)",
    ]


def test_render_language_without_frameworks():
    assert language_viewer.render_language({"id": 2, "name": "Ruby"}) == ["Ruby (id 2)", "  no frameworks"]


def _run_against(client, argv, capsys):
    def make_client(url=None):
        return LanguageCatalogClient(url="http://testserver/graphql", session=client)

    with patch.object(language_viewer, "LanguageCatalogClient", side_effect=make_client):
        code = language_viewer.main(argv)
    return code, capsys.readouterr()


def test_main_lists_languages(client, capsys):
    code, out = _run_against(client, [], capsys)
    assert code == 0
    assert "JavaScript" in out.out
    assert "PHP" in out.out


def test_main_shows_language(client, capsys):
    code, out = _run_against(client, ["1"], capsys)
    assert code == 0
    assert "JavaScript (id 1)" in out.out
    assert "  - React (similar: Vue, Preact)" in out.out


def test_main_unknown_language(client, capsys):
    code, out = _run_against(client, ["abc"], capsys)
    assert code == 1
    assert "not found" in out.err


def test_main_connection_failure(capsys):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("Connection refused")

    def make_client(url=None):
        return LanguageCatalogClient(url="http://catalog.test/graphql", session=session)

    with patch.object(language_viewer, "LanguageCatalogClient", side_effect=make_client):
        code = language_viewer.main([])
    assert code == 1
    assert "Could not load languages" in capsys.readouterr().err
