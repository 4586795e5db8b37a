"""Structured telemetry events emitted by the display runtime."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from signage.rotation.models import DisplayView, MonthlyView, SpotlightView


@dataclass(slots=True)
class TelemetryEvent:
    """Generic event written to ``logs/display_YYYYMMDD.jsonl``."""

    timestamp: datetime
    event_type: str
    level: str = "INFO"
    payload: Dict[str, Any] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_view(
        cls,
        view: DisplayView,
        *,
        organization_id: str,
        timestamp: datetime | None = None,
    ) -> "TelemetryEvent":
        """Describe what the display switched to (names only, no photos)."""

        payload: Dict[str, Any] = {"mode": view.mode.value}
        if isinstance(view, SpotlightView):
            payload.update(
                honoree_id=view.honoree.id,
                honoree_name=view.honoree.name,
                index=view.index,
                total=view.total,
            )
        elif isinstance(view, MonthlyView):
            payload.update(
                month=view.month,
                count=len(view.honorees),
                name_size=view.hint.name_size.value,
            )
        return cls(
            timestamp=timestamp or datetime.now(tz=timezone.utc),
            event_type="display_view",
            payload=payload,
            context={"organization_id": organization_id},
        )


__all__ = ["TelemetryEvent"]
