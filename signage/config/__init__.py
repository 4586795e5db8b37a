"""Configuration loading and validation package."""

from .loader import load_app_config, load_display_config, load_secrets_config
from .models import (
    AppConfig,
    DisplayConfig,
    RotationConfig,
    SecretsConfig,
    SupabaseConfig,
    SupabaseCredentials,
    TelemetryConfig,
)

__all__ = [
    "AppConfig",
    "DisplayConfig",
    "RotationConfig",
    "SecretsConfig",
    "SupabaseConfig",
    "SupabaseCredentials",
    "TelemetryConfig",
    "load_app_config",
    "load_display_config",
    "load_secrets_config",
]
