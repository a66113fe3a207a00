"""Print the tables of the configured database and their row counts."""

import asyncio

from sqlalchemy import func, select

from repup.core.config import get_settings
from repup.db.session import Database
from repup.models import BodyPart, Exercise, User, Workout, WorkoutExercise

MODELS = [BodyPart, Exercise, Workout, WorkoutExercise, User]


async def check_data():
    database = Database.from_settings(get_settings())
    try:
        await database.ping()
        tables = await database.list_tables()
        print(f"Tables: {tables}")
        async with database.transaction() as session:
            for model in MODELS:
                if model.__tablename__ not in tables:
                    print(f"Table '{model.__tablename__}' missing (run alembic upgrade head)")
                    continue
                count = await session.scalar(select(func.count()).select_from(model))
                print(f"Table '{model.__tablename__}' row count: {count}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
