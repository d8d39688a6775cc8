import pytest
import pytest_asyncio

from app.core.database import Database
from app.repositories.seed_data import DEFAULT_SETTINGS
from app.repositories.sql_store import SqlSettingsRepository, build_sql_store

from conftest import FakeClock


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'repo.db'}")
    await db.create_all()
    yield db
    await db.dispose()


def test_database_url_drivers():
    assert Database.format_database_url("postgres://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert Database.format_database_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert Database.format_database_url("sqlite:///x.db") == "sqlite+aiosqlite:///x.db"


@pytest.mark.asyncio
async def test_list_orders_newest_first_and_limits(database, local_noon):
    clock = FakeClock(local_noon)
    async with database.get_session() as session:
        store = build_sql_store(session, clock=clock)
        for index in range(4):
            await store.call_history.create({"caller_name": f"Caller {index}"})
            clock.advance(minutes=1)
        # Same timestamp: the later id comes first
        clock.advance(minutes=-1)
        await store.call_history.create({"caller_name": "Caller 4"})

        calls = await store.call_history.list(limit=3)
        assert [call.caller_name for call in calls] == ["Caller 4", "Caller 3", "Caller 2"]
        assert await store.call_history.count() == 5


@pytest.mark.asyncio
async def test_delete_and_id_reuse(database):
    async with database.get_session() as session:
        store = build_sql_store(session)
        first = await store.whitelist.create({"phone_number": "+15550000001"})
        assert await store.whitelist.delete(first.id) is True
        assert await store.whitelist.delete(first.id) is False
        second = await store.whitelist.create({"phone_number": "+15550000002"})
        assert second.id > first.id


@pytest.mark.asyncio
async def test_settings_defaults_and_merge(database):
    async with database.get_session() as session:
        repository = SqlSettingsRepository(session)
        assert await repository.ensure_defaults(DEFAULT_SETTINGS) == 4
        assert await repository.ensure_defaults(DEFAULT_SETTINGS) == 0

        merged = await repository.merge({"ai_enabled": False, "theme": "dark"})
        assert merged == {**DEFAULT_SETTINGS, "ai_enabled": "false", "theme": "dark"}


def test_sql_backend_over_http(sql_client):
    assert sql_client.get("/health").json()["features"]["storage"] == "database"
    assert sql_client.get("/api/whitelist").json() == []
    assert sql_client.get("/api/settings").json() == DEFAULT_SETTINGS

    created = sql_client.post("/api/whitelist", json={"phone_number": "+15551230000", "contact_name": "A"})
    assert created.status_code == 200
    contacts = sql_client.get("/api/whitelist").json()
    assert [contact["id"] for contact in contacts] == [created.json()["id"]]
    assert contacts[0]["created_at"].endswith("Z") or "+00:00" in contacts[0]["created_at"]

    assert sql_client.delete(f"/api/whitelist/{created.json()['id']}").status_code == 200
    assert sql_client.get("/api/stats").json()["whitelist_count"] == 0


def test_duplicate_phone_surfaces_storage_error(sql_client):
    assert sql_client.post("/api/whitelist", json={"phone_number": "+15551230000"}).status_code == 200

    response = sql_client.post("/api/whitelist", json={"phone_number": "+15551230000"})
    assert response.status_code == 500
    assert "UNIQUE" in response.json()["error"].upper()
    assert len(sql_client.get("/api/whitelist").json()) == 1


def test_voice_commands_are_logged(sql_client):
    sql_client.post("/api/voice-command", json={"transcript": "show stats"})
    assert sql_client.get("/api/stats").json()["voice_commands_today"] == 1
