# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from language_catalog_api.app.core.config import Settings
from language_catalog_api.app.core.dataset import load_dataset
from language_catalog_api.app.main import create_app
from language_catalog_api.app.services.language_service import LanguageService


@pytest.fixture(scope="session")
def dataset():
    """The built-in catalog dataset."""
    return load_dataset()


@pytest.fixture
def service(dataset):
    return LanguageService(dataset)


@pytest.fixture
def client(dataset):
    """TestClient for an app serving the built-in dataset at /graphql."""
    app = create_app(Settings(graphql_path="/graphql", graphiql_enabled=True), dataset=dataset)
    return TestClient(app)


@pytest.fixture
def graphql(client):
    """POST a query and return the decoded JSON body."""

    def _run(query, variables=None):
        body = {"query": query}
        if variables is not None:
            body["variables"] = variables
        resp = client.post("/graphql", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _run
