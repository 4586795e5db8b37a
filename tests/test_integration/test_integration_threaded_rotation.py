from __future__ import annotations

import threading
import time

from signage.config.models import RotationConfig
from signage.core.enums import DisplayMode
from signage.data_source.base import StaticRosterSource
from signage.rotation.models import SpotlightView
from signage.rotation.scheduler import ThreadingScheduler
from signage.rotation.session import DisplaySession


def test_threaded_session_should_rotate_and_stop_on_unmount(march_roster, march_fifth) -> None:
    views = []
    done = threading.Event()
    lock = threading.Lock()

    def listener(view) -> None:
        with lock:
            views.append(view)
            if len(views) >= 5:
                done.set()

    session = DisplaySession(
        StaticRosterSource({"org-1": march_roster}),
        "org-1",
        config=RotationConfig(spotlight_dwell_ms=20, monthly_dwell_ms=10),
        scheduler=ThreadingScheduler(),
        clock=lambda: march_fifth,
        listeners=[listener],
    )
    engine = session.mount()
    assert done.wait(timeout=5.0)
    session.unmount()

    with lock:
        observed = len(views)
        spotlights = [v.honoree.name for v in views if isinstance(v, SpotlightView)]
    assert spotlights[:3] == ["Ann", "Bo", "Ann"]
    assert views[1].mode is DisplayMode.MONTHLY

    time.sleep(0.2)
    with lock:
        assert len(views) == observed
    assert engine.closed
    assert not engine.is_rotating
