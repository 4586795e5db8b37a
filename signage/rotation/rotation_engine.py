"""Display rotation engine.

``RotationEngine`` takes a roster snapshot and today's date, derives who is
celebrated today and this month, and alternates the display between the
monthly roster and a spotlight on each of today's honorees. Transitions are
driven by a :class:`~signage.rotation.scheduler.Scheduler`; the engine itself
never blocks.

State machine::

    SPOTLIGHT --(spotlight dwell)--> MONTHLY --(monthly dwell)--> SPOTLIGHT(next)

With nobody born today the engine sits in MONTHLY for the whole session and
arms no timer.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, List, Sequence, Tuple

from signage.config.models import RotationConfig
from signage.core.enums import DisplayMode, SizeClass
from signage.core.errors import RotationError
from signage.data_source.models import DisplaySnapshot, RosterEntry
from signage.rotation.models import DensityHint, DisplayView, MonthlyView, PresentationState, SpotlightView
from signage.rotation.scheduler import Scheduler, TimerHandle

LOGGER = logging.getLogger(__name__)

ViewListener = Callable[[DisplayView], None]

# (max count, size class) steps, checked in order.
_NAME_SIZE_STEPS: Tuple[Tuple[int, SizeClass], ...] = (
    (2, SizeClass.XLARGE),
    (4, SizeClass.LARGE),
    (8, SizeClass.MEDIUM),
)
_DATE_SIZE_STEPS: Tuple[Tuple[int, SizeClass], ...] = ((4, SizeClass.LARGE),)
_SPACING_STEPS: Tuple[Tuple[int, SizeClass], ...] = (
    (2, SizeClass.LARGE),
    (4, SizeClass.MEDIUM),
)


def todays_honorees(entries: Iterable[RosterEntry], month: int, day: int) -> Tuple[RosterEntry, ...]:
    """Entries born on ``month``/``day``, in snapshot order."""

    return tuple(entry for entry in entries if entry.is_born_on(month, day))


def monthly_honorees(entries: Iterable[RosterEntry], month: int) -> Tuple[RosterEntry, ...]:
    """Entries born in ``month``, in snapshot order."""

    return tuple(entry for entry in entries if entry.birth_month == month)


def _step(count: int, steps: Sequence[Tuple[int, SizeClass]], fallback: SizeClass) -> SizeClass:
    for upper, size in steps:
        if count <= upper:
            return size
    return fallback


def density_hint(count: int) -> DensityHint:
    """Return size classes for a monthly roster of ``count`` names.

    Larger rosters never get larger text, so any number of names fits a fixed
    screen. An empty roster gets the largest classes.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    return DensityHint(
        count=count,
        name_size=_step(count, _NAME_SIZE_STEPS, SizeClass.SMALL),
        date_size=_step(count, _DATE_SIZE_STEPS, SizeClass.MEDIUM),
        spacing=_step(count, _SPACING_STEPS, SizeClass.SMALL),
    )


class RotationEngine:
    """Alternate between the monthly roster and today's spotlight."""

    def __init__(
        self,
        snapshot: DisplaySnapshot,
        config: RotationConfig,
        scheduler: Scheduler,
        *,
        today: date,
        listeners: Sequence[ViewListener] = (),
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._today = today
        self._organization_id = snapshot.organization_id
        todays = todays_honorees(snapshot.entries, today.month, today.day)
        monthly = monthly_honorees(snapshot.entries, today.month)
        self._state = PresentationState(
            mode=DisplayMode.SPOTLIGHT if todays else DisplayMode.MONTHLY,
            spotlight_index=0,
            todays=todays,
            monthly=monthly,
        )
        self._listeners: List[ViewListener] = list(listeners)
        self._lock = threading.RLock()
        self._handle: TimerHandle | None = None
        self._generation = 0
        self._transitions = 0
        self._started = False
        self._closed = False

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def today(self) -> date:
        return self._today

    @property
    def transitions(self) -> int:
        """Number of timer-driven transitions applied so far."""

        return self._transitions

    @property
    def is_rotating(self) -> bool:
        """``True`` while a transition timer is armed."""

        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def current_view(self) -> DisplayView:
        """Return the view the renderer should show right now."""

        return _view_for(self._state, self._today.month)

    def add_listener(self, listener: ViewListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> PresentationState:
        """Publish the initial view and arm the first timer (if anyone is celebrated today)."""

        with self._lock:
            if self._closed:
                raise RotationError("Cannot start a closed rotation engine")
            if self._started:
                return self._state
            self._started = True
            if self._state.todays:
                self._arm()
            LOGGER.info(
                "Rotation started",
                extra={
                    "organization_id": self._organization_id,
                    "today": self._today.isoformat(),
                    "n_todays": len(self._state.todays),
                    "n_monthly": len(self._state.monthly),
                    "mode": self._state.mode.value,
                },
            )
            self._notify()
            return self._state

    def close(self) -> None:
        """Cancel the pending timer; no transition is observable afterwards."""

        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._generation += 1
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            LOGGER.debug("Rotation closed", extra={"organization_id": self._organization_id})

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _dwell_sec(self, mode: DisplayMode) -> float:
        if mode is DisplayMode.SPOTLIGHT:
            return self._config.spotlight_dwell_sec
        return self._config.monthly_dwell_sec

    def _arm(self) -> None:
        generation = self._generation
        delay = self._dwell_sec(self._state.mode)
        self._handle = self._scheduler.call_later(delay, lambda: self._on_timer(generation))

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if self._closed or generation != self._generation:
                LOGGER.debug("Ignoring stale rotation timer", extra={"generation": generation})
                return
            self._handle = None
            self._state = _next_state(self._state)
            self._transitions += 1
            self._generation += 1
            self._arm()
            LOGGER.debug(
                "Display transition",
                extra={
                    "organization_id": self._organization_id,
                    "mode": self._state.mode.value,
                    "spotlight_index": self._state.spotlight_index,
                },
            )
            self._notify()

    def _notify(self) -> None:
        view = self.current_view()
        for listener in list(self._listeners):
            listener(view)


def _next_state(state: PresentationState) -> PresentationState:
    if state.mode is DisplayMode.SPOTLIGHT:
        return replace(state, mode=DisplayMode.MONTHLY)
    index = state.spotlight_index
    if len(state.todays) > 1:
        index = (index + 1) % len(state.todays)
    return replace(state, mode=DisplayMode.SPOTLIGHT, spotlight_index=index)


def _view_for(state: PresentationState, month: int) -> DisplayView:
    if state.mode is DisplayMode.SPOTLIGHT:
        return SpotlightView(
            honoree=state.todays[state.spotlight_index],
            index=state.spotlight_index,
            total=len(state.todays),
        )
    return MonthlyView(month=month, honorees=state.monthly, hint=density_hint(len(state.monthly)))


__all__ = ["RotationEngine", "ViewListener", "density_hint", "monthly_honorees", "todays_honorees"]
