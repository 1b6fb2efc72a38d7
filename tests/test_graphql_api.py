# tests/test_graphql_api.py
from unittest.mock import patch

from language_catalog_api.app.core.dataset import Dataset


def test_languages_query(graphql):
    body = graphql("{ languages { id name } }")
    assert "errors" not in body
    assert body["data"]["languages"] == [
        {"id": "1", "name": "JavaScript"},
        {"id": "2", "name": "Ruby"},
        {"id": "3", "name": "Elixir"},
        {"id": "4", "name": "PHP"},
    ]


def test_languages_with_frameworks_by_id(graphql):
    body = graphql("{ languages { id frameworksById } }")
    assert body["data"]["languages"][0] == {"id": "1", "frameworksById": ["1", "2", "3", "4", "5"]}


def test_get_language_with_frameworks(graphql):
    query = """
    query GetLanguage($id: ID!) {
      getLanguage(id: $id) {
        id
        name
        frameworks { id name similarById }
      }
    }
    """
    body = graphql(query, {"id": "1"})
    language = body["data"]["getLanguage"]
    assert language["id"] == "1"
    assert language["name"] == "JavaScript"
    assert [f["name"] for f in language["frameworks"]] == ["Vue", "React", "Ember", "Angular", "Preact"]
    react = language["frameworks"][1]
    assert react == {"id": "2", "name": "React", "similarById": ["1", "5"]}
    # Scalar similarById in the data is served as a list.
    assert language["frameworks"][4]["similarById"] == ["2"]


def test_get_language_unknown_id_is_null(graphql):
    body = graphql('{ getLanguage(id: "99") { id name } }')
    assert "errors" not in body
    assert body["data"]["getLanguage"] is None


def test_get_language_non_numeric_id_is_null(graphql):
    body = graphql('{ getLanguage(id: "abc") { id name } }')
    assert "errors" not in body
    assert body["data"]["getLanguage"] is None


def test_frameworks_resolved_only_when_selected(graphql):
    with patch.object(Dataset, "resolve_frameworks_of") as resolve:
        body = graphql('{ getLanguage(id: "1") { id name frameworksById } }')
    assert body["data"]["getLanguage"]["frameworksById"] == ["1", "2", "3", "4", "5"]
    resolve.assert_not_called()


def test_no_mutation_type(client):
    resp = client.post("/graphql", json={"query": 'mutation { addLanguage(name: "Go") { id } }'})
    body = resp.json()
    assert body.get("errors")


def test_graphiql_served_on_get(client):
    resp = client.get("/graphql", headers={"Accept": "text/html"})
    assert resp.status_code == 200
    assert "graphiql" in resp.text.lower()


def test_cors_headers(client):
    resp = client.options(
        "/graphql",
        headers={"Origin": "http://localhost:8080", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers.get("access-control-allow-origin") in ("*", "http://localhost:8080")


def test_get_language_rejects_underscore_and_unicode_digits(graphql):
    for raw in ("0_1", "١"):
        body = graphql("query Q($id: ID!) { getLanguage(id: $id) { id name } }", {"id": raw})
        assert "errors" not in body
        assert body["data"]["getLanguage"] is None
