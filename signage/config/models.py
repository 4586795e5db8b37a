"""Typed configuration models for the signage runtime.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the rest of the runtime. ``display.yml`` maps onto
:class:`DisplayConfig` and ``secrets.yaml`` onto :class:`SecretsConfig`.
"""
from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class RotationConfig(BaseModel):
    """Dwell times for the two presentation modes.

    The durations are independent so a deployment can keep the spotlight on
    screen longer than the monthly roster (or vice versa).
    """

    spotlight_dwell_ms: PositiveInt = Field(10_000, description="Time a spotlight stays visible")
    monthly_dwell_ms: PositiveInt = Field(5_000, description="Time the monthly roster stays visible")

    @property
    def spotlight_dwell_sec(self) -> float:
        return self.spotlight_dwell_ms / 1_000.0

    @property
    def monthly_dwell_sec(self) -> float:
        return self.monthly_dwell_ms / 1_000.0


class SupabaseConfig(BaseModel):
    """Location of the roster backend (PostgREST endpoint of a Supabase project)."""

    url: str = Field(..., min_length=8)
    table: str = Field("team_members", min_length=1)
    timeout_sec: float = Field(5.0, gt=0)
    max_retries: PositiveInt = 3

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("supabase.url must be an http(s) URL")
        return value.rstrip("/")


class TelemetryConfig(BaseModel):
    """Logging/telemetry switches."""

    log_level: str = Field("INFO")
    reports_dir: str = Field("data/telemetry")


class DisplayConfig(BaseModel):
    """Top-level display config (``display.yml``)."""

    organization_id: str = Field(..., min_length=1)
    timezone: str = Field("UTC")
    date_check_interval_sec: PositiveInt = 60
    rotation: RotationConfig = Field(default_factory=RotationConfig)
    supabase: SupabaseConfig
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value


class SupabaseCredentials(BaseModel):
    """Public anon key; row-level security on the backend scopes what it reads."""

    anon_key: str = Field(..., min_length=10)


class SecretsConfig(BaseModel):
    """Secrets used by the backend integration. Mirrors secrets.example.yaml."""

    supabase: SupabaseCredentials

    model_config = ConfigDict(frozen=True)


class AppConfig(BaseModel):
    """Runtime config composed of the display settings and secrets."""

    display: DisplayConfig
    secrets: SecretsConfig
