"""Domain layer - Pure business entities and logic"""

from .models import CurrentSession, TimeEntry, UserPreferences
from .editing import EntryDraft, EntryValidationError

__all__ = ["CurrentSession", "TimeEntry", "UserPreferences", "EntryDraft", "EntryValidationError"]
