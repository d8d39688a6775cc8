from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


class FakeClock:
    """Callable clock whose time tests move by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def make_settings(**overrides) -> Settings:
    values = dict(
        DATABASE_URL="",
        AUTH_ENABLED=False,
        KEEP_ALIVE_URL="",
        PLAN_MONTHLY_CREDIT_LIMIT=25.0,
        DEBUG=False,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def local_noon() -> datetime:
    return datetime.now().astimezone().replace(hour=12, minute=0, second=0, microsecond=0)


@pytest.fixture()
def app_factory():
    def _build(**overrides):
        return create_app(make_settings(**overrides))
    return _build


@pytest.fixture()
def client(app_factory):
    with TestClient(app_factory()) as test_client:
        yield test_client


@pytest.fixture()
def sql_client(app_factory, tmp_path):
    database_url = f"sqlite+aiosqlite:///{tmp_path / 'treloar.db'}"
    with TestClient(app_factory(DATABASE_URL=database_url)) as test_client:
        yield test_client
