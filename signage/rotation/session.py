"""Display session lifecycle: mount, unmount, remount on date change."""
from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence

from signage.config.models import RotationConfig
from signage.core.errors import DataSourceError
from signage.core.time_utils import DateClock
from signage.data_source.base import RosterSource
from signage.data_source.models import DisplaySnapshot
from signage.rotation.rotation_engine import RotationEngine, ViewListener
from signage.rotation.scheduler import Scheduler

LOGGER = logging.getLogger(__name__)


class DisplaySession:
    """Own the single live :class:`RotationEngine` of one organization's display.

    A session reads the roster once per mount. A failed read is reported here
    and the display degrades to an empty monthly roster instead of crashing.
    The date is sampled from ``clock`` at mount time; ``refresh_if_date_changed``
    remounts once the calendar day moves on.
    """

    def __init__(
        self,
        source: RosterSource,
        organization_id: str,
        *,
        config: RotationConfig,
        scheduler: Scheduler,
        clock: DateClock,
        listeners: Sequence[ViewListener] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._organization_id = organization_id
        self._config = config
        self._scheduler = scheduler
        self._clock = clock
        self._listeners: List[ViewListener] = list(listeners)
        self._logger = logger or LOGGER
        self._engine: RotationEngine | None = None
        self._mounted_on: date | None = None
        self.last_error: DataSourceError | None = None

    @property
    def engine(self) -> RotationEngine | None:
        return self._engine

    @property
    def mounted_on(self) -> date | None:
        return self._mounted_on

    @property
    def is_mounted(self) -> bool:
        return self._engine is not None

    def mount(self) -> RotationEngine:
        """Load the roster and start a fresh engine (no-op if already mounted)."""

        if self._engine is not None:
            return self._engine
        snapshot = self._load_snapshot()
        today = self._clock()
        engine = RotationEngine(
            snapshot,
            self._config,
            self._scheduler,
            today=today,
            listeners=self._listeners,
        )
        self._engine = engine
        self._mounted_on = today
        engine.start()
        return engine

    def unmount(self) -> None:
        if self._engine is None:
            return
        self._engine.close()
        self._engine = None
        self._mounted_on = None

    def remount(self) -> RotationEngine:
        """Tear down the current engine and mount again with a re-fetched roster."""

        self.unmount()
        return self.mount()

    def refresh_if_date_changed(self) -> bool:
        """Remount when the clock's date differs from the mount date."""

        if self._engine is None:
            return False
        today = self._clock()
        if today == self._mounted_on:
            return False
        self._logger.info(
            "Date changed, remounting display",
            extra={"previous": str(self._mounted_on), "today": today.isoformat()},
        )
        self.remount()
        return True

    def _load_snapshot(self) -> DisplaySnapshot:
        try:
            snapshot = self._source.fetch_roster(self._organization_id)
        except DataSourceError as exc:
            self.last_error = exc
            self._logger.error(
                "Roster load failed, showing empty display",
                extra={"organization_id": self._organization_id, "error": str(exc)},
            )
            return DisplaySnapshot.empty(self._organization_id)
        self.last_error = None
        return snapshot


__all__ = ["DisplaySession"]
