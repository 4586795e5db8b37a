"""Roster source contract and an in-memory implementation."""
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Protocol

from signage.core.errors import DataSourceError
from signage.core.types import OrganizationId

from .models import DisplaySnapshot, RosterEntry


class RosterSource(Protocol):
    """Capability handed to display sessions for reading a roster.

    Implementations return a point-in-time snapshot and raise
    :class:`~signage.core.errors.DataSourceError` when the read fails.
    """

    def fetch_roster(self, organization_id: str) -> DisplaySnapshot:
        ...


class StaticRosterSource:
    """Serve rosters from memory (offline signage, tests, demos)."""

    def __init__(self, rosters: Mapping[str, Iterable[RosterEntry]] | None = None) -> None:
        self._rosters: Dict[str, tuple[RosterEntry, ...]] = {
            org: tuple(entries) for org, entries in (rosters or {}).items()
        }
        self.fetch_count = 0

    def set_roster(self, organization_id: str, entries: Iterable[RosterEntry]) -> None:
        self._rosters[organization_id] = tuple(entries)

    def fetch_roster(self, organization_id: str) -> DisplaySnapshot:
        self.fetch_count += 1
        if organization_id not in self._rosters:
            raise DataSourceError(f"Unknown organization: {organization_id}")
        return DisplaySnapshot(
            organization_id=OrganizationId(organization_id),
            entries=self._rosters[organization_id],
        )


__all__ = ["RosterSource", "StaticRosterSource"]
