"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Switch storage implementations
- Mock data for testing
- Keep the persisted JSON format in one place

Every value is a whole JSON document under one key. Reads never fail: a value
that cannot be parsed is logged and replaced with that key's default.
"""

import logging
from typing import Any, Callable, List, Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import CurrentSession, TimeEntry
from app.infra.db import KeyValueModel, get_engine

logger = logging.getLogger(__name__)

KEY_IS_WORKING = "isWorking"
KEY_CURRENT_SESSION = "currentSession"
KEY_TIME_ENTRIES = "timeEntries"


class KeyValueRepository:
    """
    Raw access to the key-value table.
    """

    def __init__(self, session: Optional[AsyncSession] = None):
        self.session = session

    async def _get_session(self) -> AsyncSession:
        """Get session - either injected or create new one"""
        if self.session:
            return self.session
        engine = get_engine()
        return engine.get_session()

    async def get(self, key: str) -> Optional[str]:
        """Get the stored text for a key, None if absent"""
        session = await self._get_session()
        async with session:
            model = await session.get(KeyValueModel, key)
            return model.value if model else None

    async def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key"""
        session = await self._get_session()
        async with session:
            model = await session.get(KeyValueModel, key)
            if model is None:
                session.add(KeyValueModel(key=key, value=value))
            else:
                model.value = value
            await session.commit()

    async def delete(self, key: str) -> None:
        """Delete a key if present"""
        session = await self._get_session()
        async with session:
            await session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
            await session.commit()

    async def keys(self) -> List[str]:
        """All stored keys"""
        session = await self._get_session()
        async with session:
            result = await session.execute(select(KeyValueModel.key).order_by(KeyValueModel.key))
            return list(result.scalars().all())


class WorkStateRepository:
    """
    Typed access to the three application keys.

    Converts between domain models (Pydantic) and their JSON form.
    """

    _is_working = TypeAdapter(bool)
    _session = TypeAdapter(CurrentSession)
    _entries = TypeAdapter(List[TimeEntry])

    def __init__(self, store: Optional[KeyValueRepository] = None):
        self.store = store or KeyValueRepository()

    async def _load(self, key: str, adapter: TypeAdapter, default: Callable[[], Any]) -> Any:
        raw = await self.store.get(key)
        if raw is None:
            return default()
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Could not parse stored value for %r, using default: %s", key, e)
            return default()

    async def _save(self, key: str, adapter: TypeAdapter, value: Any) -> None:
        raw = adapter.dump_json(value, by_alias=True).decode('utf-8')
        await self.store.set(key, raw)

    async def load_is_working(self) -> bool:
        return await self._load(KEY_IS_WORKING, self._is_working, lambda: False)

    async def save_is_working(self, is_working: bool) -> None:
        await self._save(KEY_IS_WORKING, self._is_working, is_working)

    async def load_session(self) -> CurrentSession:
        return await self._load(KEY_CURRENT_SESSION, self._session, CurrentSession)

    async def save_session(self, session: CurrentSession) -> None:
        await self._save(KEY_CURRENT_SESSION, self._session, session)

    async def load_entries(self) -> List[TimeEntry]:
        return await self._load(KEY_TIME_ENTRIES, self._entries, list)

    async def save_entries(self, entries: List[TimeEntry]) -> None:
        await self._save(KEY_TIME_ENTRIES, self._entries, entries)
