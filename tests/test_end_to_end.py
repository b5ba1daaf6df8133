import httpx
import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from teamdesk.client.api import TeamsApi
from teamdesk.client.drag import TeamDrag
from teamdesk.client.store import TeamsStore
from teamdesk.db.mongo import get_teams_collection
from teamdesk.main import app


@pytest_asyncio.fixture
async def api():
    collection = AsyncMongoMockClient()["teamdesk_e2e"]["teams"]
    app.dependency_overrides[get_teams_collection] = lambda: collection
    async with TeamsApi(base_url="http://test", transport=httpx.ASGITransport(app=app)) as api:
        yield api
    app.dependency_overrides.clear()


@pytest.fixture
def notes():
    return []


@pytest_asyncio.fixture
async def store(api, notes):
    return TeamsStore(api, lambda t, d: notes.append(t), lambda t, d: notes.append(t))


@pytest.mark.asyncio
async def test_drag_second_team_above_first(api, store, notes):
    a = (await api.create({"teamName": "A", "members": [{"name": "Ann"}]}))["id"]
    b = (await api.create({"teamName": "B", "members": [{"name": "Ben"}]}))["id"]
    await store.fetch_teams()
    assert [t["_id"] for t in store.teams] == [a, b]

    drag = TeamDrag(store)
    drag.start(1)
    drag.over(0)
    assert await drag.end() is True

    assert notes == ["Teams Reordered Successfully"]
    listed = await api.get_all()
    assert [t["_id"] for t in listed] == [b, a]
    assert {t["_id"]: t["order"] for t in listed} == {a: 1, b: 0}
    assert [t["_id"] for t in store.teams] == [b, a]


@pytest.mark.asyncio
async def test_status_toggle_round_trip(api, store):
    team_id = (await api.create({"teamName": "A", "members": [{"name": "Ann"}]}))["id"]
    await store.fetch_teams()

    toggle = store.status_toggle(team_id, "directorApprovalStatus")
    await toggle.click()

    assert toggle.status.value == "approved"
    assert (await api.get_by_id(team_id))["directorApprovalStatus"] == "approved"


@pytest.mark.asyncio
async def test_deleting_missing_team_rolls_back(api, store, notes):
    team_id = (await api.create({"teamName": "A", "members": [{"name": "Ann"}]}))["id"]
    await store.fetch_teams()
    await api.delete(team_id)

    assert await store.delete_team(team_id) is False
    assert [t["_id"] for t in store.teams] == [team_id]
    assert notes == ["Error Deleting Team"]


@pytest.mark.asyncio
async def test_search_matches_server_side(api, store):
    await api.create({"teamName": "Alpha", "manager": "Bob", "members": [{"name": "Eve"}]})
    await api.create({"teamName": "Beta", "manager": "Carl", "members": [{"name": "Finn"}]})
    await store.fetch_teams()

    for query in ("eve", "BOB", "a", "zzz"):
        store.set_search_query(query)
        server_side = await api.get_all(search=query)
        assert [t["_id"] for t in store.filtered_teams] == [t["_id"] for t in server_side]
