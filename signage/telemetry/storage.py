"""Helpers for persisting telemetry events to disk."""
from __future__ import annotations

import json
from pathlib import Path

from signage.core.errors import TelemetryError
from signage.telemetry.events import TelemetryEvent


class TelemetryStorage:
    """Append structured telemetry events as JSON lines.

    The entry point subscribes a storage-backed listener to the display
    session so every view change lands in ``logs/display_YYYYMMDD.jsonl``.
    """

    def __init__(self, *, logs_dir: Path) -> None:
        self._logs_dir = logs_dir
        self._logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def logs_dir(self) -> Path:
        return self._logs_dir

    def append_event(self, event: TelemetryEvent) -> Path:
        """Append ``event`` as JSON to ``logs/display_YYYYMMDD.jsonl``."""

        date_str = event.timestamp.strftime("%Y%m%d")
        path = self._logs_dir / f"display_{date_str}.jsonl"
        try:
            with path.open("a", encoding="utf-8") as handle:
                json.dump(event.to_dict(), handle, ensure_ascii=False)
                handle.write("\n")
        except OSError as exc:  # pragma: no cover - filesystem errors are rare
            raise TelemetryError(f"Failed to write telemetry event: {exc}") from exc
        return path


def default_storage(base_dir: Path) -> TelemetryStorage:
    """Factory returning storage rooted under ``base_dir``."""

    return TelemetryStorage(logs_dir=base_dir / "logs")


__all__ = ["TelemetryStorage", "default_storage"]
