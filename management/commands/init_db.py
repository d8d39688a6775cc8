import asyncio
import sys

from app.core.config import settings
from app.core.database import Database
from app.repositories.seed_data import DEFAULT_SETTINGS
from app.repositories.sql_store import SqlSettingsRepository


async def init(database_url: str, reset: bool = False) -> int:
    database = Database(database_url)
    try:
        if reset:
            await database.drop_all()
        await database.create_all()
        async with database.get_session() as session:
            return await SqlSettingsRepository(session).ensure_defaults(DEFAULT_SETTINGS)
    finally:
        await database.dispose()


def run():
    """Create tables and default settings (--reset drops everything first)"""
    if settings.demo_mode:
        print('DATABASE_URL not set, nothing to initialize')
        return 1
    reset = "--reset" in sys.argv[2:]
    added = asyncio.run(init(settings.DATABASE_URL, reset=reset))
    print(f"Database ready ({added} default settings added{', after reset' if reset else ''})")
    return 0

if __name__ == "__main__":
    run()
