"""Utilities for dealing with timezones and calendar dates.

The display decides who is celebrated from the calendar date in the configured
timezone. The helpers below are the single source of truth for that date so
the engine never reads the system clock on its own.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

DEFAULT_TZ_NAME = "UTC"

DateClock = Callable[[], date]


def get_app_timezone(tz_name: str | None = None) -> ZoneInfo:
    """Return the ZoneInfo object for the configured timezone."""

    target_name = tz_name or DEFAULT_TZ_NAME
    return ZoneInfo(target_name)


def date_clock(tz_name: str | None = None) -> DateClock:
    """Build a zero-argument clock returning today's date in ``tz_name``."""

    tz = get_app_timezone(tz_name)

    def _clock() -> date:
        return datetime.now(tz).date()

    return _clock
