"""Seed script to populate the local dev database with sample bookmarks.

Usage:
    PYTHONPATH=src python scripts/seed_data.py populate
    PYTHONPATH=src python scripts/seed_data.py populate --force
    PYTHONPATH=src python scripts/seed_data.py clear
"""

import argparse
import asyncio

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import get_settings
from models import Bookmark
from schemas.bookmark import BookmarkCreate
from services import bookmark_service

BOOKMARKS = [
    {
        'title': 'Python Official Documentation',
        'url': 'https://docs.python.org/3/',
        'description': 'Comprehensive reference for the Python programming language.',
        'rating': 5,
    },
    {
        'title': 'MDN Web Docs',
        'url': 'https://developer.mozilla.org/',
        'description': 'The definitive resource for web platform documentation.',
        'rating': 5,
    },
    {
        'title': 'FastAPI',
        'url': 'https://fastapi.tiangolo.com/',
        'description': 'Modern, fast web framework for building APIs with Python type hints.',
        'rating': 4,
    },
    {
        'title': 'SQLAlchemy 2.0 Tutorial',
        'url': 'https://docs.sqlalchemy.org/en/20/tutorial/',
        'description': None,
        'rating': 4,
    },
    {
        'title': 'Hacker News',
        'url': 'https://news.ycombinator.com/',
        'description': 'Tech news and discussion.',
        'rating': 3,
    },
]


async def create_bookmarks(session: AsyncSession) -> None:
    """Insert the sample bookmarks."""
    for data in BOOKMARKS:
        await bookmark_service.create_bookmark(session, BookmarkCreate(**data))
    print(f'  Created {len(BOOKMARKS)} bookmarks')


async def clear_data(session: AsyncSession) -> None:
    """Remove every bookmark."""
    deleted = await bookmark_service.truncate_bookmarks(session)
    print(f'  Deleted {deleted} bookmarks')
    print('Clear complete.')


async def populate(force: bool = False) -> None:
    """Populate the database with seed data."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            bookmark_count = (await session.execute(
                select(func.count()).select_from(Bookmark)
            )).scalar()

            if bookmark_count:
                if force:
                    print('Existing data found, clearing first (--force)...')
                    await clear_data(session)
                else:
                    print(
                        f'Data already exists ({bookmark_count} bookmarks). '
                        f'Use --force to clear and re-seed.'
                    )
                    return

            print('Populating seed data...')
            await create_bookmarks(session)
            await session.commit()
            print('Seed data created successfully.')
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


async def clear() -> None:
    """Clear all bookmarks."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            await clear_data(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    if not settings.debug:
        print(
            "ERROR: Seed script requires DEBUG=true.\n"
            "This script modifies data directly and must only run against a local dev database."
        )
        raise SystemExit(1)

    parser = argparse.ArgumentParser(description='Seed the dev database with sample bookmarks.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    populate_parser = subparsers.add_parser('populate', help='Populate database with sample bookmarks')
    populate_parser.add_argument(
        '--force', action='store_true',
        help='Clear existing bookmarks before populating',
    )

    subparsers.add_parser('clear', help='Remove all bookmarks')

    args = parser.parse_args()

    if args.command == 'populate':
        asyncio.run(populate(force=args.force))
    elif args.command == 'clear':
        asyncio.run(clear())


if __name__ == '__main__':
    main()
