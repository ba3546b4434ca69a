"""Shared fixtures for the seeder tests."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.seeding.schema import create_schema


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """URL of a throwaway SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"


@pytest_asyncio.fixture
async def seeded_db_url(sqlite_url: str) -> AsyncGenerator[str, None]:
    """SQLite URL with the seeder's tables already created.

    The seeder opens its own engine from the URL, so the schema is created
    through a separate engine that is disposed before the test runs.
    """
    engine = create_async_engine(sqlite_url, echo=False)
    await create_schema(engine)
    await engine.dispose()
    yield sqlite_url


@pytest_asyncio.fixture
async def sqlite_engine(seeded_db_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Engine for reading back what the seeder wrote."""
    engine = create_async_engine(seeded_db_url, echo=False)
    yield engine
    await engine.dispose()


@pytest.fixture
def fixed_now() -> datetime:
    """A stable creation time for deterministic assertions."""
    return datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)
