"""
Entry Store - the ordered list of finalized time entries.

Every mutation is written through to the key-value store right away; there
is no batching.
"""

import logging
from typing import List, Optional

from app.domain.models import TimeEntry, new_entry_id
from app.infra.repository import WorkStateRepository

logger = logging.getLogger(__name__)


class EntryStore:
    """
    Owns the finalized entries. Entries are immutable, so callers only ever
    see values; changing one means replacing it by id.
    """

    def __init__(self, repository: Optional[WorkStateRepository] = None):
        self.repo = repository or WorkStateRepository()
        self._entries: List[TimeEntry] = []

    async def load(self) -> List[TimeEntry]:
        """Load entries from storage, replacing the in-memory list"""
        self._entries = await self.repo.load_entries()
        logger.info("Loaded %d time entries", len(self._entries))
        return self.entries

    @property
    def entries(self) -> List[TimeEntry]:
        """Entries in insertion order"""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, entry_id: str) -> Optional[TimeEntry]:
        return next((e for e in self._entries if e.id == entry_id), None)

    async def add(self, entry: TimeEntry) -> TimeEntry:
        """Append a new entry; a duplicate id is replaced by a fresh one"""
        if self.get(entry.id) is not None:
            entry = entry.model_copy(update={"id": new_entry_id()})
        await self._commit(self._entries + [entry])
        return entry

    async def update(self, entry: TimeEntry) -> TimeEntry:
        """
        Replace the stored entry that has the same id.

        Raises:
            ValueError: if no entry with that id exists
        """
        if self.get(entry.id) is None:
            raise ValueError(f"Time entry {entry.id} not found")
        await self._commit([entry if e.id == entry.id else e for e in self._entries])
        return entry

    async def delete(self, entry_id: str) -> bool:
        """Delete an entry by id. Returns False if it did not exist."""
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        await self._commit(remaining)
        return True

    async def _commit(self, entries: List[TimeEntry]):
        # Memory only changes once the write went through
        await self.repo.save_entries(entries)
        self._entries = entries
