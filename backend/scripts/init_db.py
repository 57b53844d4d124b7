"""
Initialize the database: create all tables.
Run from backend/ with: python -m scripts.init_db
"""

import asyncio

from dialysis_records.config import get_settings
from dialysis_records.database import Database
import dialysis_records.models  # noqa: F401  registers every table on Base.metadata


async def init():
    print("Creating database tables...")
    database = Database.from_settings(get_settings())
    try:
        await database.connect()
    finally:
        await database.dispose()
    print("All tables created successfully.")


if __name__ == "__main__":
    asyncio.run(init())
