import asyncio

from sqlalchemy import text

from app.core.config import settings
from app.core.database import Database


async def check(database_url: str) -> bool:
    database = Database(database_url, disable_pool=True)
    print('Using DB URL:', database.engine.url.render_as_string(hide_password=True))
    try:
        async with database.engine.connect() as conn:
            result = await conn.execute(text('SELECT 1'))
            print('DB CONNECTED, result:', result.scalar())
        return True
    except Exception as e:
        print('DB CONNECTION FAILED:', e)
        return False
    finally:
        await database.dispose()


def run():
    """Check that DATABASE_URL is reachable"""
    if settings.demo_mode:
        print('DATABASE_URL not set, the app runs in demo mode with in-memory data')
        return 1
    return 0 if asyncio.run(check(settings.DATABASE_URL)) else 1

if __name__ == "__main__":
    run()
