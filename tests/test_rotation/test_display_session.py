from __future__ import annotations

from datetime import date

from signage.core.enums import DisplayMode
from signage.data_source.base import StaticRosterSource
from signage.rotation.models import MonthlyView
from signage.rotation.session import DisplaySession


class MutableClock:
    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


def _session(source, clock, rotation_config, fake_scheduler, recorder, organization_id="org-1") -> DisplaySession:
    return DisplaySession(
        source,
        organization_id,
        config=rotation_config,
        scheduler=fake_scheduler,
        clock=clock,
        listeners=[recorder],
    )


def test_mount_should_start_engine_from_fetched_roster(
    march_roster, march_fifth, rotation_config, fake_scheduler, view_recorder
) -> None:
    source = StaticRosterSource({"org-1": march_roster})
    session = _session(source, MutableClock(march_fifth), rotation_config, fake_scheduler, view_recorder)

    engine = session.mount()
    assert session.is_mounted
    assert session.mounted_on == march_fifth
    assert engine.state.mode is DisplayMode.SPOTLIGHT
    assert session.mount() is engine
    assert source.fetch_count == 1
    assert len(view_recorder.views) == 1


def test_mount_should_degrade_to_empty_monthly_when_roster_fails(
    march_fifth, rotation_config, fake_scheduler, view_recorder
) -> None:
    source = StaticRosterSource()
    session = _session(source, MutableClock(march_fifth), rotation_config, fake_scheduler, view_recorder, "missing")

    engine = session.mount()
    assert session.last_error is not None
    assert engine.state.mode is DisplayMode.MONTHLY
    assert fake_scheduler.timers == []
    view = view_recorder.views[-1]
    assert isinstance(view, MonthlyView)
    assert view.is_empty


def test_remount_should_cancel_old_engine_and_refetch(
    march_roster, entry_factory, march_fifth, rotation_config, fake_scheduler, view_recorder
) -> None:
    source = StaticRosterSource({"org-1": march_roster})
    session = _session(source, MutableClock(march_fifth), rotation_config, fake_scheduler, view_recorder)
    old_engine = session.mount()
    old_timer = fake_scheduler.pending[0]

    source.set_roster("org-1", [entry_factory("Dee", 3, 5)])
    new_engine = session.remount()

    assert old_engine.closed
    assert old_timer.cancelled
    assert new_engine is not old_engine
    assert [e.name for e in new_engine.state.todays] == ["Dee"]
    assert source.fetch_count == 2

    fake_scheduler.advance(8.0)
    assert old_engine.transitions == 0
    assert new_engine.transitions == 1


def test_refresh_should_remount_only_when_date_changes(
    march_roster, march_fifth, rotation_config, fake_scheduler, view_recorder
) -> None:
    clock = MutableClock(march_fifth)
    source = StaticRosterSource({"org-1": march_roster})
    session = _session(source, clock, rotation_config, fake_scheduler, view_recorder)

    assert session.refresh_if_date_changed() is False
    first = session.mount()
    assert session.refresh_if_date_changed() is False

    clock.today = date(2024, 3, 6)
    assert session.refresh_if_date_changed() is True
    second = session.engine
    assert first.closed
    assert second is not None and second.today == date(2024, 3, 6)
    assert second.state.mode is DisplayMode.MONTHLY
    assert not second.is_rotating


def test_unmount_should_close_engine(march_roster, march_fifth, rotation_config, fake_scheduler, view_recorder) -> None:
    source = StaticRosterSource({"org-1": march_roster})
    session = _session(source, MutableClock(march_fifth), rotation_config, fake_scheduler, view_recorder)
    engine = session.mount()
    session.unmount()
    session.unmount()
    assert engine.closed
    assert not session.is_mounted
    assert fake_scheduler.pending == []
