"""
Pytest configuration and fixtures.
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from PySide6.QtWidgets import QApplication

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infra.db import Base
from app.infra.repository import KeyValueRepository, WorkStateRepository
from app.domain.models import TimeEntry


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Qt timers and widgets need an application instance"""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Create a throwaway SQLite database for testing"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Create a new session for a test"""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
def kv_repo(db_session):
    return KeyValueRepository(session=db_session)


@pytest.fixture
def state_repo(kv_repo):
    return WorkStateRepository(store=kv_repo)


def make_entry(day: date, start: str, end: str = None, break_minutes: int = 0, **kwargs) -> TimeEntry:
    """Build an entry from 'HH:MM' strings on a given day"""
    start_dt = datetime.combine(day, datetime.strptime(start, "%H:%M").time())
    end_dt = datetime.combine(day, datetime.strptime(end, "%H:%M").time()) if end else None
    return TimeEntry(date=day, start_time=start_dt, end_time=end_dt,
                     break_duration=break_minutes, **kwargs)
