import asyncio

from sqlalchemy import text

from repup.core.config import get_settings
from repup.db.session import Database


async def drop_tables():
    print("Dropping all tables...")
    database = Database.from_settings(get_settings())
    async with database.engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
    await database.drop_all()
    print("Tables dropped.")
    await database.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
