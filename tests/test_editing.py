"""
Tests for the manual entry form.
"""

import datetime

import pytest

from app.domain.calculations import worked_minutes
from app.domain.editing import EntryDraft, EntryValidationError
from conftest import make_entry

DAY = datetime.date(2026, 3, 2)


def test_valid_draft_builds_entry():
    draft = EntryDraft(date=DAY, start_time=datetime.time(8, 0), end_time=datetime.time(16, 30),
                       break_duration=30, project="  Website ", notes=" review ")
    entry = draft.to_entry()

    assert draft.is_new
    assert entry.id
    assert entry.date == DAY
    assert entry.start_time == datetime.datetime(2026, 3, 2, 8, 0)
    assert entry.end_time == datetime.datetime(2026, 3, 2, 16, 30)
    assert entry.project == "Website"
    assert entry.notes == "review"
    assert worked_minutes(entry) == 480


def test_missing_required_fields():
    draft = EntryDraft(end_time=datetime.time(16, 0), break_duration=-1)

    with pytest.raises(EntryValidationError) as exc:
        draft.to_entry()

    assert exc.value.errors == {
        "date": "required",
        "start_time": "required",
        "break_duration": "negative",
    }


def test_end_time_is_optional():
    entry = EntryDraft(date=DAY, start_time=datetime.time(9, 0)).to_entry()
    assert entry.end_time is None


def test_end_before_start_crosses_midnight():
    draft = EntryDraft(date=DAY, start_time=datetime.time(22, 0), end_time=datetime.time(6, 0))
    entry = draft.to_entry()

    assert entry.end_time == datetime.datetime(2026, 3, 3, 6, 0)
    assert entry.date == DAY
    assert draft.preview_minutes() == 480


def test_seconds_are_dropped():
    draft = EntryDraft(date=DAY, start_time=datetime.time(9, 0, 42), end_time=datetime.time(10, 0, 5))
    entry = draft.to_entry()
    assert entry.start_time.second == 0
    assert entry.end_time.second == 0


def test_edit_keeps_id():
    original = make_entry(DAY, "09:00", "17:00", break_minutes=30, project="Internal")
    draft = EntryDraft.from_entry(original)

    assert not draft.is_new
    assert draft.start_time == datetime.time(9, 0)

    draft.break_duration = 45
    edited = draft.to_entry()

    assert edited.id == original.id
    assert edited.break_duration == 45
    assert edited.project == "Internal"


def test_blank_draft_starts_now():
    now = datetime.datetime(2026, 3, 2, 14, 37, 12)
    draft = EntryDraft.blank(now)

    assert draft.date == DAY
    assert draft.start_time == datetime.time(14, 37)
    assert draft.end_time == datetime.time(14, 37)
    assert draft.preview_minutes() == 0


def test_preview_incomplete_is_zero():
    assert EntryDraft(date=DAY, start_time=datetime.time(9, 0)).preview_minutes() == 0
    assert EntryDraft(start_time=datetime.time(9, 0), end_time=datetime.time(10, 0)).preview_minutes() == 0


def test_preview_clamped():
    draft = EntryDraft(date=DAY, start_time=datetime.time(9, 0), end_time=datetime.time(9, 30),
                       break_duration=60)
    assert draft.preview_minutes() == 0
