"""
Tests for the session tracker: start, break and stop arithmetic.
"""

from datetime import date, datetime, timedelta

from app.domain.calculations import worked_minutes
from app.domain.models import CurrentSession
from app.services.timer_service import TimerService

T0 = datetime(2026, 3, 2, 9, 0)


def at(hours: int, minutes: int = 0, seconds: int = 0) -> datetime:
    return T0.replace(hour=hours, minute=minutes, second=seconds)


def test_full_day_with_lunch_break():
    """Start 09:00, break 12:00-12:30, stop 17:00 gives 7h30m"""
    timer = TimerService()
    timer.start_work(at(9))
    timer.toggle_break(at(12))
    timer.toggle_break(at(12, 30))
    entry = timer.stop_work(at(17))

    assert entry.start_time == at(9)
    assert entry.end_time == at(17)
    assert entry.break_duration == 30
    assert entry.date == date(2026, 3, 2)
    assert worked_minutes(entry) == 450
    assert entry.project == ""
    assert entry.notes == ""


def test_stop_without_breaks():
    timer = TimerService()
    timer.start_work(T0)
    entry = timer.stop_work(T0 + timedelta(minutes=95))

    assert entry.break_duration == 0
    assert worked_minutes(entry) == 95


def test_stop_resets_session():
    timer = TimerService()
    timer.start_work(T0)
    timer.stop_work(at(10))

    assert timer.session == CurrentSession()
    assert not timer.is_working()
    assert timer.stop_work(at(11)) is None


def test_break_toggle_adds_floored_minutes():
    timer = TimerService()
    timer.start_work(T0)
    assert timer.toggle_break(at(10))
    assert timer.session.break_start == at(10)

    timer.toggle_break(at(10, 14, 59))

    assert timer.session.total_break_time == 14
    assert timer.session.break_start is None


def test_breaks_accumulate():
    timer = TimerService()
    timer.start_work(T0)
    for start, end in [(at(10), at(10, 15)), (at(12), at(12, 45))]:
        timer.toggle_break(start)
        timer.toggle_break(end)
    assert timer.session.total_break_time == 60


def test_toggle_break_without_session_is_ignored():
    timer = TimerService()
    assert timer.toggle_break(T0) is False
    assert timer.session == CurrentSession()


def test_stop_during_break_discards_open_break():
    timer = TimerService()
    timer.start_work(at(9))
    timer.toggle_break(at(11))
    timer.toggle_break(at(11, 20))
    timer.toggle_break(at(16))
    entry = timer.stop_work(at(17))

    assert entry.break_duration == 20
    assert worked_minutes(entry) == 480 - 20


def test_start_while_working_replaces_session():
    timer = TimerService()
    timer.start_work(at(8))
    timer.toggle_break(at(9))
    timer.start_work(at(10))

    assert timer.session.start_time == at(10)
    assert timer.session.break_start is None
    assert timer.session.total_break_time == 0


def test_stop_never_ends_before_start():
    timer = TimerService()
    timer.start_work(at(10))
    entry = timer.stop_work(at(9, 59))
    assert entry.end_time == entry.start_time


class TestElapsedWorkedSeconds:

    def test_zero_without_session(self):
        assert TimerService().elapsed_worked_seconds(T0) == 0

    def test_subtracts_completed_and_running_breaks(self):
        timer = TimerService()
        timer.start_work(at(9))
        timer.toggle_break(at(10))
        timer.toggle_break(at(10, 10))
        timer.toggle_break(at(11))

        # 2h15m elapsed, 10 min completed break, 15 min running break
        assert timer.elapsed_worked_seconds(at(11, 15)) == (135 - 10 - 15) * 60

    def test_frozen_during_break(self):
        timer = TimerService()
        timer.start_work(at(9))
        timer.toggle_break(at(10))
        assert timer.elapsed_worked_seconds(at(10, 5)) == timer.elapsed_worked_seconds(at(10, 30))

    def test_monotonic_without_break(self):
        timer = TimerService()
        timer.start_work(T0)
        readings = [timer.elapsed_worked_seconds(T0 + timedelta(seconds=s)) for s in range(0, 300, 7)]
        assert readings == sorted(readings)

    def test_clamped_at_zero(self):
        timer = TimerService()
        timer.restore(CurrentSession(start_time=at(9), total_break_time=120))
        assert timer.elapsed_worked_seconds(at(10)) == 0
        assert timer.elapsed_worked_seconds(at(8)) == 0

    def test_query_does_not_mutate(self):
        timer = TimerService()
        timer.start_work(T0)
        timer.toggle_break(at(10))
        before = timer.session.model_copy()
        timer.elapsed_worked_seconds(at(12))
        assert timer.session == before


def test_signals_are_emitted():
    timer = TimerService()
    events = []
    timer.work_started.connect(lambda: events.append("started"))
    timer.break_started.connect(lambda: events.append("break"))
    timer.break_ended.connect(lambda minutes: events.append(("break_end", minutes)))
    timer.work_stopped.connect(lambda entry: events.append(("stopped", entry.break_duration)))

    timer.start_work(at(9))
    timer.toggle_break(at(12))
    timer.toggle_break(at(12, 30))
    timer.stop_work(at(17))

    assert events == ["started", "break", ("break_end", 30), ("stopped", 30)]


def test_restore_adopts_session_copy():
    session = CurrentSession(start_time=at(8), total_break_time=5)
    timer = TimerService()
    timer.restore(session)

    assert timer.is_working()
    assert timer.session == session
    assert timer.session is not session
