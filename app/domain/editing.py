"""
Manual entry editing.

The edit dialog works on an EntryDraft: a loosely filled form that may be
incomplete. Only a valid draft can become a TimeEntry.
"""

import datetime
from typing import Dict, Optional
from pydantic import BaseModel

from app.domain.calculations import roll_over_end_time
from app.domain.models import TimeEntry, new_entry_id


class EntryValidationError(ValueError):
    """
    Raised when a draft cannot be saved.

    `errors` maps field names to an error code ('required', 'negative').
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        fields = ", ".join(f"{name} ({code})" for name, code in errors.items())
        super().__init__(f"Invalid time entry: {fields}")


class EntryDraft(BaseModel):
    """Form state of the entry dialog"""

    entry_id: Optional[str] = None
    date: Optional[datetime.date] = None
    start_time: Optional[datetime.time] = None
    end_time: Optional[datetime.time] = None
    break_duration: int = 0
    project: str = ""
    notes: str = ""

    @classmethod
    def from_entry(cls, entry: TimeEntry) -> "EntryDraft":
        """Pre-fill the form with an existing entry"""
        return cls(
            entry_id=entry.id,
            date=entry.date,
            start_time=entry.start_time.time(),
            end_time=entry.end_time.time() if entry.end_time else None,
            break_duration=entry.break_duration,
            project=entry.project,
            notes=entry.notes,
        )

    @classmethod
    def blank(cls, now: Optional[datetime.datetime] = None) -> "EntryDraft":
        """Empty form for a new entry: today, starting and ending now"""
        now = now or datetime.datetime.now()
        current = now.time().replace(second=0, microsecond=0)
        return cls(date=now.date(), start_time=current, end_time=current)

    @property
    def is_new(self) -> bool:
        return self.entry_id is None

    def validate_fields(self) -> Dict[str, str]:
        """Field-level errors; empty when the draft can be saved"""
        errors: Dict[str, str] = {}
        if self.date is None:
            errors["date"] = "required"
        if self.start_time is None:
            errors["start_time"] = "required"
        if self.break_duration < 0:
            errors["break_duration"] = "negative"
        return errors

    def _combined_times(self):
        start = datetime.datetime.combine(self.date, self.start_time.replace(second=0, microsecond=0))
        end = None
        if self.end_time is not None:
            end = datetime.datetime.combine(self.date, self.end_time.replace(second=0, microsecond=0))
            # An end before the start means the shift crossed midnight
            end = roll_over_end_time(start, end)
        return start, end

    def to_entry(self) -> TimeEntry:
        """
        Build the TimeEntry described by this draft.

        Raises:
            EntryValidationError: if required fields are missing
        """
        errors = self.validate_fields()
        if errors:
            raise EntryValidationError(errors)

        start, end = self._combined_times()
        return TimeEntry(
            id=self.entry_id or new_entry_id(),
            date=self.date,
            start_time=start,
            end_time=end,
            break_duration=self.break_duration,
            project=self.project.strip(),
            notes=self.notes.strip(),
        )

    def preview_minutes(self) -> float:
        """Worked minutes the draft would produce, 0 while incomplete"""
        if self.validate_fields() or self.end_time is None:
            return 0.0
        start, end = self._combined_times()
        elapsed = (end - start).total_seconds() / 60
        return max(0.0, elapsed - self.break_duration)
