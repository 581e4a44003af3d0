"""Services layer - Business logic"""

from .timer_service import TimerService
from .entry_store import EntryStore
from .export_service import ExportLabels, ExportService
from .worktime_service import WorkTimeService

__all__ = ["TimerService", "EntryStore", "ExportLabels", "ExportService", "WorkTimeService"]
