"""Roster datamodels and the parser for backend payloads.

A :class:`DisplaySnapshot` is the point-in-time roster of one organization.
It is read once when a display session mounts and never mutated afterwards;
the rotation engine derives its honoree lists from it.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Tuple

from signage.core.types import MemberId, OrganizationId

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RosterEntry:
    """Single team member as stored in the ``team_members`` table."""

    id: MemberId
    name: str
    birth_month: int
    birth_day: int
    photo_url: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.birth_month <= 12:
            raise ValueError(f"birth_month out of range: {self.birth_month}")
        if not 1 <= self.birth_day <= 31:
            raise ValueError(f"birth_day out of range: {self.birth_day}")

    @property
    def birthday_label(self) -> str:
        """Human readable birthday, e.g. ``"March 5"``."""

        return f"{calendar.month_name[self.birth_month]} {self.birth_day}"

    def is_born_on(self, month: int, day: int) -> bool:
        return self.birth_month == month and self.birth_day == day


@dataclass(frozen=True, slots=True)
class DisplaySnapshot:
    """Ordered roster for one organization, loaded once per session."""

    organization_id: OrganizationId
    entries: Tuple[RosterEntry, ...] = ()
    fetched_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @classmethod
    def empty(cls, organization_id: str) -> "DisplaySnapshot":
        """Snapshot used when the roster could not be loaded."""

        return cls(organization_id=OrganizationId(organization_id))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def parse_team_members_response(
    organization_id: str,
    payload: Iterable[Mapping[str, Any]] | None,
) -> DisplaySnapshot:
    """Convert PostgREST rows into a :class:`DisplaySnapshot`.

    Rows look like ``{"id": "...", "name": "Ann", "birthday_month": 3,
    "birthday_day": 5, "photo_url": null}``. Rows that are not objects, lack a
    string name or carry an impossible date are skipped; the rest keep the
    order the backend used.
    """

    if not payload:
        return DisplaySnapshot.empty(organization_id)
    entries: List[RosterEntry] = []
    for row in payload:
        if not isinstance(row, Mapping):
            LOGGER.warning("Skipping non-object roster row", extra={"row_type": type(row).__name__})
            continue
        name = row.get("name")
        try:
            entry = RosterEntry(
                id=MemberId(str(row["id"])),
                name=name.strip() if isinstance(name, str) else "",
                birth_month=int(row["birthday_month"]),
                birth_day=int(row["birthday_day"]),
                photo_url=row.get("photo_url") or None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.warning("Skipping malformed roster row: %s", exc, extra={"row_id": row.get("id")})
            continue
        if not entry.name:
            LOGGER.warning("Skipping roster row without a name", extra={"row_id": entry.id})
            continue
        entries.append(entry)
    return DisplaySnapshot(organization_id=OrganizationId(organization_id), entries=tuple(entries))


__all__ = ["DisplaySnapshot", "RosterEntry", "parse_team_members_response"]
