"""Roster data source package.

Modules here read team rosters from the hosted backend and turn them into the
immutable :class:`DisplaySnapshot` consumed by the rotation engine.
"""
from .base import RosterSource, StaticRosterSource
from .models import DisplaySnapshot, RosterEntry, parse_team_members_response
from .supabase_client import SupabaseRosterSource

__all__ = [
    "DisplaySnapshot",
    "RosterEntry",
    "RosterSource",
    "StaticRosterSource",
    "SupabaseRosterSource",
    "parse_team_members_response",
]
