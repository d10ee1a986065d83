# create_tables.py
import asyncio
from fanpage.core.database import engine, create_all_tables

async def init_db():
    print("Creating tables...")
    await create_all_tables()
    print("Tables created successfully! 🎉")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(init_db())
