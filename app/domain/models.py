"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
The local store keeps every value as JSON text. Pydantic validates that text on
the way in (including the ISO-8601 date strings) and produces the exact
camelCase shape on the way out, so the persisted format lives in one place.
"""

import uuid
from datetime import date, datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def new_entry_id() -> str:
    """Generate a unique, stable identifier for a time entry"""
    return uuid.uuid4().hex


def _to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime (e.g. '...Z') to local wall-clock time"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class TimeEntry(BaseModel):
    """
    A finalized record of one work period.

    Entries are immutable: an edit produces a new instance with the same id.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=new_entry_id)
    date: date
    start_time: datetime
    end_time: Optional[datetime] = None
    break_duration: int = Field(default=0, ge=0, description="Break minutes")
    project: str = ""
    notes: str = ""

    @field_validator("start_time", "end_time")
    @classmethod
    def _local_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_local_naive(value) if value is not None else None

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_day(cls, value):
        # Accept full timestamps ("2025-03-01T23:00:00.000Z") as well as plain days
        if isinstance(value, str) and "T" in value:
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            return _to_local_naive(value).date()
        return value

    @field_validator("project", "notes", mode="before")
    @classmethod
    def _text(cls, value):
        return "" if value is None else value

    @property
    def is_open(self) -> bool:
        return self.end_time is None


class CurrentSession(BaseModel):
    """
    The single live, not-yet-persisted work period.

    total_break_time only counts completed breaks; a break still running is
    described by break_start alone.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_time: Optional[datetime] = None
    break_start: Optional[datetime] = None
    total_break_time: int = Field(default=0, ge=0, description="Completed break minutes")

    @field_validator("start_time", "break_start")
    @classmethod
    def _local_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_local_naive(value) if value is not None else None

    @property
    def is_active(self) -> bool:
        return self.start_time is not None

    @property
    def on_break(self) -> bool:
        return self.break_start is not None


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    language: Literal["auto", "de", "en"] = Field(
        default="auto",
        description="UI and export language: 'de', 'en', or 'auto' (detect from system)"
    )
    theme: Literal["dark", "light"] = Field(default="dark", description="Window palette")
    export_directory: Optional[str] = Field(
        default=None,
        description="Default folder for CSV/PDF exports (home directory if unset)"
    )
    show_seconds: bool = True
