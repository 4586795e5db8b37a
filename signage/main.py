from __future__ import annotations

import logging
import os
import signal
import sys
import threading
from pathlib import Path

from signage.config.loader import load_app_config
from signage.config.models import AppConfig
from signage.core.errors import TelemetryError
from signage.core.time_utils import date_clock
from signage.data_source.supabase_client import SupabaseRosterSource
from signage.interfaces import LogRenderer
from signage.rotation.models import DisplayView
from signage.rotation.rotation_engine import ViewListener
from signage.rotation.scheduler import ThreadingScheduler
from signage.rotation.session import DisplaySession
from signage.telemetry import configure_logging
from signage.telemetry.events import TelemetryEvent
from signage.telemetry.storage import TelemetryStorage, default_storage


def main() -> None:
    project_root = Path(__file__).resolve().parents[1]
    config_dir = project_root / "config"
    secrets_path = _resolve_secrets_path(config_dir)
    config = load_app_config(display_path=config_dir / "display.yml", secrets_path=secrets_path)
    display = config.display

    telemetry_root = (project_root / display.telemetry.reports_dir).resolve()
    storage = default_storage(telemetry_root)
    logger = configure_logging(log_dir=telemetry_root / "logs", level=display.telemetry.log_level)
    logger.info(
        "Bootstrapping display",
        extra={"organization_id": display.organization_id, "timezone": display.timezone},
    )

    source = SupabaseRosterSource(display.supabase, config.secrets)
    renderer = LogRenderer(logger.getChild("renderer"))
    listeners = [renderer.render, _telemetry_listener(storage, display.organization_id, logger)]
    session = _build_session(config, source, listeners, logger)

    stop_event = threading.Event()

    def _request_stop(signum: int, _: object) -> None:
        logger.info("Received signal", extra={"signal": signum})
        stop_event.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    try:
        session.mount()
        while not stop_event.wait(display.date_check_interval_sec):
            session.refresh_if_date_changed()
    except KeyboardInterrupt:  # pragma: no cover - manual exit
        logger.info("Interrupted by user")
    finally:
        session.unmount()
        source.close()
        logger.info("Shutdown complete")


def _build_session(
    config: AppConfig,
    source: SupabaseRosterSource,
    listeners: list[ViewListener],
    logger: logging.Logger,
) -> DisplaySession:
    display = config.display
    return DisplaySession(
        source,
        display.organization_id,
        config=display.rotation,
        scheduler=ThreadingScheduler(),
        clock=date_clock(display.timezone),
        listeners=listeners,
        logger=logger.getChild("session"),
    )


def _resolve_secrets_path(config_dir: Path) -> Path:
    env_path = os.environ.get("APP_SECRETS_PATH")
    if env_path:
        return Path(env_path)
    candidate = config_dir / "secrets.yaml"
    if candidate.exists():
        return candidate
    fallback = config_dir / "secrets.example.yaml"
    print(f"[bootstrap] secrets.yaml not found, using {fallback}")
    return fallback


def _telemetry_listener(storage: TelemetryStorage, organization_id: str, logger: logging.Logger) -> ViewListener:
    def listener(view: DisplayView) -> None:
        event = TelemetryEvent.from_view(view, organization_id=organization_id)
        try:
            storage.append_event(event)
        except TelemetryError as exc:  # pragma: no cover - telemetry path
            logger.warning("Failed to log display view: %s", exc)

    return listener


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - top-level safety
        print(f"Fatal error: {exc}", file=sys.stderr)
        raise
