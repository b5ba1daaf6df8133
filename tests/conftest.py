import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from teamdesk.db.mongo import get_teams_collection
from teamdesk.main import app


@pytest.fixture
def collection():
    return AsyncMongoMockClient()["teamdesk_test"]["teams"]


@pytest.fixture
def client(collection):
    app.dependency_overrides[get_teams_collection] = lambda: collection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_team(client):
    def _create(team_name, manager="Bob", director="Dana", members=("Eve",)):
        r = client.post(
            "/teams",
            json={
                "teamName": team_name,
                "manager": manager,
                "director": director,
                "members": [{"name": m} for m in members],
            },
        )
        assert r.status_code == 200
        return r.json()["id"]

    return _create
