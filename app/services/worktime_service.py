"""
WorkTime Service - the application controller.

Owns the session tracker and the entry store and is the only place that
persists their state. The UI calls one method per user action; each method
finishes (including the write to storage) before it returns.
"""

import datetime
import logging
from pathlib import Path
from typing import List, Optional

from app.domain.editing import EntryDraft
from app.domain.models import CurrentSession, TimeEntry
from app.infra.repository import WorkStateRepository
from app.services.entry_store import EntryStore
from app.services.export_service import ExportLabels, ExportService
from app.services.timer_service import TimerService

logger = logging.getLogger(__name__)


class WorkTimeService:
    """
    Coordinates start/break/stop, manual edits and exports.
    """

    def __init__(self, repository: Optional[WorkStateRepository] = None,
                 timer: Optional[TimerService] = None,
                 exporter: Optional[ExportService] = None):
        self.repo = repository or WorkStateRepository()
        self.timer = timer or TimerService()
        self.store = EntryStore(self.repo)
        self.exporter = exporter or ExportService()

    async def load(self):
        """Restore the working flag, the live session and all entries"""
        is_working = await self.repo.load_is_working()
        session = await self.repo.load_session()
        if not is_working and session.is_active:
            logger.warning("Discarding stored session: not marked as working")
            session = CurrentSession()
        self.timer.restore(session)
        await self.store.load()

    @property
    def entries(self) -> List[TimeEntry]:
        return self.store.entries

    @property
    def is_working(self) -> bool:
        return self.timer.is_working()

    async def _save_session(self):
        await self.repo.save_is_working(self.timer.is_working())
        await self.repo.save_session(self.timer.session)

    async def start_work(self, now: Optional[datetime.datetime] = None):
        self.timer.start_work(now)
        await self._save_session()

    async def toggle_break(self, now: Optional[datetime.datetime] = None) -> bool:
        if not self.timer.toggle_break(now):
            return False
        await self._save_session()
        return True

    async def stop_work(self, now: Optional[datetime.datetime] = None) -> Optional[TimeEntry]:
        """Finalize the running session and append it to the entries"""
        entry = self.timer.stop_work(now)
        if entry is None:
            return None
        entry = await self.store.add(entry)
        await self._save_session()
        logger.info("Work period %s - %s recorded", entry.start_time, entry.end_time)
        return entry

    async def save_entry(self, draft: EntryDraft) -> TimeEntry:
        """
        Create or update an entry from the edit dialog.

        Raises:
            EntryValidationError: if the draft is incomplete
            ValueError: if the edited entry no longer exists
        """
        entry = draft.to_entry()
        if draft.is_new:
            return await self.store.add(entry)
        return await self.store.update(entry)

    async def delete_entry(self, entry_id: str) -> bool:
        return await self.store.delete(entry_id)

    def set_export_language(self, lang: str):
        self.exporter.labels = ExportLabels.for_language(lang)

    def export_csv(self, directory: Path,
                   now: Optional[datetime.datetime] = None) -> Optional[Path]:
        return self.exporter.export_csv(self.store.entries, directory, now)

    def export_pdf(self, directory: Path,
                   now: Optional[datetime.datetime] = None) -> Optional[Path]:
        return self.exporter.export_pdf(self.store.entries, directory, now)
