"""Error hierarchy shared by the signage subsystems.

Centralizing exception types lets the entry point tell recoverable situations
(backend unreachable, empty display) apart from fatal ones (bad config).
Submodules should raise the most specific error available.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the application."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class DataSourceError(CoreError):
    """Raised when the roster backend cannot be read or returns garbage."""


class RotationError(CoreError):
    """Raised when the rotation engine is driven outside its lifecycle."""


class TelemetryError(CoreError):
    """Raised for telemetry/logging persistence issues."""
