"""
Timer Service - Core session tracking logic.

Architecture Decision: Observer Pattern (Qt Signals)
The service emits signals when state changes, keeping it decoupled from UI.
The once-per-second tick only reads the session; every change to it comes
from an explicit start/break/stop call.
"""

import datetime
import logging
from typing import Optional
from PySide6.QtCore import QObject, QTimer, Signal

from app.domain.calculations import format_clock
from app.domain.models import CurrentSession, TimeEntry

logger = logging.getLogger(__name__)


class TimerService(QObject):
    """
    The session tracker. Owns the single live session but knows nothing about
    the UI or about persistence.
    """

    # Signals
    tick = Signal(str, int)  # (formatted_time, worked_seconds)
    work_started = Signal()
    work_stopped = Signal(object)  # TimeEntry
    break_started = Signal()
    break_ended = Signal(int)  # minutes added to the session

    def __init__(self, session: Optional[CurrentSession] = None):
        super().__init__()
        self.session: CurrentSession = session or CurrentSession()

        # Internal timer that fires every second
        self.timer = QTimer()
        self.timer.timeout.connect(self._on_tick)

    def restore(self, session: CurrentSession):
        """Adopt a session loaded from storage"""
        self.session = session.model_copy()
        if self.session.is_active:
            self.timer.start(1000)
        else:
            self.timer.stop()

    def start_work(self, now: Optional[datetime.datetime] = None):
        """
        Start a new work session.

        An already running session is replaced, not finalized.
        """
        now = now or datetime.datetime.now()
        if self.session.is_active:
            logger.info("Session started at %s replaced by a new one", self.session.start_time)

        self.session = CurrentSession(start_time=now, break_start=None, total_break_time=0)
        self.timer.start(1000)  # 1000ms = 1 second
        self.work_started.emit()

    def toggle_break(self, now: Optional[datetime.datetime] = None) -> bool:
        """
        Start a break, or end the running one.

        Returns:
            False if no session is active (nothing happens), True otherwise
        """
        if not self.session.is_active:
            logger.debug("Break toggled without an active session, ignored")
            return False

        now = now or datetime.datetime.now()
        if self.session.on_break:
            minutes = int((now - self.session.break_start).total_seconds() // 60)
            minutes = max(0, minutes)
            self.session = self.session.model_copy(update={
                "break_start": None,
                "total_break_time": self.session.total_break_time + minutes,
            })
            self.break_ended.emit(minutes)
        else:
            self.session = self.session.model_copy(update={"break_start": now})
            self.break_started.emit()
        return True

    def stop_work(self, now: Optional[datetime.datetime] = None) -> Optional[TimeEntry]:
        """
        Finalize the session into a new TimeEntry and reset it.

        A break still running at this point is dropped: only completed
        breaks count towards the entry's break duration.

        Returns:
            The new entry, or None if no session was active
        """
        if not self.session.is_active:
            return None

        now = now or datetime.datetime.now()
        start = self.session.start_time
        if self.session.on_break:
            logger.debug("Open break since %s discarded on stop", self.session.break_start)

        entry = TimeEntry(
            date=start.date(),
            start_time=start,
            end_time=max(now, start),
            break_duration=self.session.total_break_time,
        )

        self.timer.stop()
        self.session = CurrentSession()
        self.work_stopped.emit(entry)
        return entry

    def elapsed_worked_seconds(self, now: Optional[datetime.datetime] = None) -> int:
        """
        Worked seconds of the live session (display only, never mutates).

        Elapsed time minus completed breaks minus the running break, >= 0.
        """
        if not self.session.is_active:
            return 0

        now = now or datetime.datetime.now()
        worked = (now - self.session.start_time).total_seconds()
        worked -= self.session.total_break_time * 60
        if self.session.on_break:
            worked -= (now - self.session.break_start).total_seconds()
        return max(0, int(worked))

    def _on_tick(self):
        """Called every second to update the display"""
        if not self.session.is_active:
            return

        seconds = self.elapsed_worked_seconds()
        self.tick.emit(format_clock(seconds), seconds)

    def is_working(self) -> bool:
        """Check if a session is running"""
        return self.session.is_active

    def is_on_break(self) -> bool:
        return self.session.on_break
