"""Shared type aliases for readability and contract enforcement."""
from __future__ import annotations

from typing import NewType

MemberId = NewType("MemberId", str)
OrganizationId = NewType("OrganizationId", str)
