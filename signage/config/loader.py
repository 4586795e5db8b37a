"""YAML loaders for the config subsystem.

Each helper consumes one YAML file, validates it via models.py and returns
typed objects to the caller. ``SUPABASE_URL`` and ``SUPABASE_ANON_KEY`` in the
environment take precedence over the files so hosted deployments can keep
credentials out of the repository.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .models import AppConfig, DisplayConfig, SecretsConfig

_DEFAULT_CONFIG_DIR = Path("config")

ENV_SUPABASE_URL = "SUPABASE_URL"
ENV_SUPABASE_ANON_KEY = "SUPABASE_ANON_KEY"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def _section(data: Mapping, key: str) -> Dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"`{key}` must be a mapping")
    return dict(section)


def load_display_config(
    path: Path | str = _DEFAULT_CONFIG_DIR / "display.yml",
    *,
    environ: Mapping[str, str] | None = None,
) -> DisplayConfig:
    """Load display.yml (organization, timezone, rotation, supabase, telemetry)."""

    env = os.environ if environ is None else environ
    data = dict(_read_yaml(Path(path)))
    if env.get(ENV_SUPABASE_URL):
        supabase = _section(data, "supabase")
        supabase["url"] = env[ENV_SUPABASE_URL]
        data["supabase"] = supabase
    return DisplayConfig.model_validate(data)


def load_secrets_config(
    path: Path | str = _DEFAULT_CONFIG_DIR / "secrets.yaml",
    *,
    environ: Mapping[str, str] | None = None,
) -> SecretsConfig:
    """Load secrets.yaml (Supabase anon key).

    When ``SUPABASE_ANON_KEY`` is set the file becomes optional.
    """

    env = os.environ if environ is None else environ
    env_key = env.get(ENV_SUPABASE_ANON_KEY)
    path = Path(path)
    if env_key and not path.exists():
        return SecretsConfig.model_validate({"supabase": {"anon_key": env_key}})
    data = dict(_read_yaml(path))
    if env_key:
        supabase = _section(data, "supabase")
        supabase["anon_key"] = env_key
        data["supabase"] = supabase
    return SecretsConfig.model_validate(data)


def load_app_config(
    *,
    display_path: Path | str = _DEFAULT_CONFIG_DIR / "display.yml",
    secrets_path: Path | str = _DEFAULT_CONFIG_DIR / "secrets.yaml",
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and aggregate both config files into a single AppConfig."""

    display = load_display_config(display_path, environ=environ)
    secrets = load_secrets_config(secrets_path, environ=environ)
    return AppConfig(display=display, secrets=secrets)
