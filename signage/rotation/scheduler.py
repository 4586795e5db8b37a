"""Cancellable one-shot timers used to drive display transitions.

The rotation engine never sleeps; it asks a :class:`Scheduler` to call it back
after the current dwell time and re-arms from inside that callback. Tests plug
in a manual scheduler with a virtual clock, production uses
:class:`ThreadingScheduler`.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol

LOGGER = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Handle returned by :meth:`Scheduler.call_later`."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Schedule ``callback`` to run once after ``delay_sec`` seconds."""

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class ThreadingScheduler:
    """Scheduler backed by daemon :class:`threading.Timer` threads.

    Cancelling a timer that already started running cannot stop it, which is
    why callers must guard their callbacks (the rotation engine does so with a
    generation token).
    """

    def __init__(self, *, name_prefix: str = "signage-timer") -> None:
        self._name_prefix = name_prefix
        self._counter = 0
        self._lock = threading.Lock()

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> threading.Timer:
        if delay_sec < 0:
            raise ValueError("delay_sec must be non-negative")
        with self._lock:
            self._counter += 1
            name = f"{self._name_prefix}-{self._counter}"
        timer = threading.Timer(delay_sec, self._run, args=(callback,))
        timer.name = name
        timer.daemon = True
        timer.start()
        return timer

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:  # pragma: no cover - timer thread
            LOGGER.exception("Scheduled callback failed")


__all__ = ["Scheduler", "ThreadingScheduler", "TimerHandle"]
