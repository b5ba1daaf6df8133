import pytest
from fastapi.testclient import TestClient

import teamdesk.db.mongo as mongo
from teamdesk.main import app


@pytest.fixture(autouse=True)
def fresh_client():
    mongo.close_client()
    yield
    mongo.close_client()


def test_get_client_is_shared():
    assert mongo.get_client() is mongo.get_client()


def test_close_client_forgets_client():
    first = mongo.get_client()

    mongo.close_client()
    assert mongo._client is None

    second = mongo.get_client()
    assert second is not first
    assert mongo.get_client() is second


def test_close_client_without_client_is_noop():
    mongo.close_client()
    assert mongo._client is None


def test_get_teams_collection_uses_configured_name():
    col = mongo.get_teams_collection()
    assert col.name == mongo.get_settings().teams_collection


def test_app_shutdown_closes_client():
    mongo.get_client()
    assert mongo._client is not None

    with TestClient(app) as client:
        assert client.get("/").status_code == 200

    assert mongo._client is None
