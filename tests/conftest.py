from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, List

import pytest

from signage.config.models import RotationConfig, SupabaseConfig, SecretsConfig, SupabaseCredentials
from signage.core.types import MemberId, OrganizationId
from signage.data_source.models import DisplaySnapshot, RosterEntry
from signage.rotation.models import DisplayView


class FakeTimer:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Virtual clock: timers only fire when the test calls ``advance``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay_sec, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = sorted((t for t in self.pending if t.due <= target + 1e-9), key=lambda t: t.due)
            if not due:
                break
            timer = due[0]
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target


class ViewRecorder:
    def __init__(self) -> None:
        self.views: List[DisplayView] = []

    def __call__(self, view: DisplayView) -> None:
        self.views.append(view)


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def view_recorder() -> ViewRecorder:
    return ViewRecorder()


@pytest.fixture
def rotation_config() -> RotationConfig:
    return RotationConfig(spotlight_dwell_ms=8_000, monthly_dwell_ms=8_000)


@pytest.fixture
def entry_factory() -> Callable[..., RosterEntry]:
    counter = {"n": 0}

    def _factory(name: str, month: int, day: int, photo_url: str | None = None) -> RosterEntry:
        counter["n"] += 1
        return RosterEntry(
            id=MemberId(f"member-{counter['n']}"),
            name=name,
            birth_month=month,
            birth_day=day,
            photo_url=photo_url,
        )

    return _factory


@pytest.fixture
def snapshot_factory() -> Callable[..., DisplaySnapshot]:
    def _factory(entries, organization_id: str = "org-1") -> DisplaySnapshot:
        return DisplaySnapshot(organization_id=OrganizationId(organization_id), entries=tuple(entries))

    return _factory


@pytest.fixture
def march_roster(entry_factory) -> list[RosterEntry]:
    return [
        entry_factory("Ann", 3, 5),
        entry_factory("Bo", 3, 5),
        entry_factory("Cy", 4, 1),
    ]


@pytest.fixture
def march_fifth() -> date:
    return date(2024, 3, 5)


@pytest.fixture
def supabase_config() -> SupabaseConfig:
    return SupabaseConfig(url="https://demo.supabase.co", table="team_members", max_retries=3)


@pytest.fixture
def secrets_config() -> SecretsConfig:
    return SecretsConfig(supabase=SupabaseCredentials(anon_key="anon-key-123456"))


@pytest.fixture
def telemetry_tmpdir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("telemetry")
