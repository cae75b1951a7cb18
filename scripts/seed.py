"""Seed the articles database with sample newspapers and articles."""
import argparse
import asyncio
import time

from articles_api.config import settings
from articles_api.database import Base, async_session, create_tables, engine
from articles_api.logging_config import configure_logging
from articles_api.seed import ARTICLES, NEWSPAPERS, seed_database


async def seed(reset: bool = False):
    start = time.perf_counter()

    if reset:
        print("Dropping all tables")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await create_tables()

    async with async_session() as session:
        written = await seed_database(session)
        await session.commit()

    await engine.dispose()

    elapsed = time.perf_counter() - start
    if written:
        print(f"Seeding complete in {elapsed:.1f}s")
        print(f"  Newspapers: {len(NEWSPAPERS)}")
        print(f"  Articles: {len(ARTICLES)}")
    else:
        print("Database already contains newspapers, nothing to do (use --reset to start over)")


def main():
    parser = argparse.ArgumentParser(description="Seed the articles database")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables first")
    args = parser.parse_args()
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(seed(reset=args.reset))


if __name__ == "__main__":
    main()
