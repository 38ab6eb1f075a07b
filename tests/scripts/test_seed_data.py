"""Tests for the dev database seed script."""
from collections.abc import Generator

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from core.config import get_settings
from models.bookmark import Bookmark
from scripts.seed_data import BOOKMARKS, clear, main, populate


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None]:
    """Re-read settings from the environment around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


async def fetch_titles(session_factory: async_sessionmaker[AsyncSession]) -> list[str]:
    async with session_factory() as session:
        result = await session.execute(select(Bookmark.title).order_by(Bookmark.id))
        return list(result.scalars().all())


async def count_rows(session_factory: async_sessionmaker[AsyncSession]) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(Bookmark))
        return result.scalar_one()


async def test_populate_inserts_sample_bookmarks(
    async_engine: AsyncEngine,  # noqa: ARG001
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    await populate()

    assert await fetch_titles(session_factory) == [b['title'] for b in BOOKMARKS]


async def test_populate_refuses_existing_data_without_force(
    async_engine: AsyncEngine,  # noqa: ARG001
    session_factory: async_sessionmaker[AsyncSession],
    capsys: pytest.CaptureFixture[str],
) -> None:
    await populate()
    await populate()

    assert await count_rows(session_factory) == len(BOOKMARKS)
    assert 'Use --force to clear and re-seed.' in capsys.readouterr().out


async def test_populate_force_replaces_existing_data(
    async_engine: AsyncEngine,  # noqa: ARG001
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        session.add(Bookmark(title='Old', url='https://old.example.com', rating=1))
        await session.commit()

    await populate(force=True)

    assert await fetch_titles(session_factory) == [b['title'] for b in BOOKMARKS]


async def test_clear_removes_all_bookmarks(
    async_engine: AsyncEngine,  # noqa: ARG001
    session_factory: async_sessionmaker[AsyncSession],
    capsys: pytest.CaptureFixture[str],
) -> None:
    await populate()

    await clear()

    assert await count_rows(session_factory) == 0
    assert f'Deleted {len(BOOKMARKS)} bookmarks' in capsys.readouterr().out


def test_main_requires_debug(
    database_url: str,  # noqa: ARG001
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv('DEBUG', 'false')
    monkeypatch.setattr('sys.argv', ['seed_data.py', 'clear'])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
