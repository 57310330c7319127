"""Configuration loader for the Cruise Countdown display."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
import yaml

STORE_BACKENDS = ("file", "http")


@dataclass(frozen=True)
class StoreConfig:
    """Where the host app publishes its shared key-value state."""

    backend: str
    directory: str
    suite_name: str
    url: str
    token: str

    @property
    def path(self) -> Path:
        return Path(self.directory) / f"{self.suite_name}.json"


@dataclass(frozen=True)
class DisplayConfig:
    """Display configuration for rendering."""

    size: str
    scale: int
    timezone: str


@dataclass(frozen=True)
class RefreshConfig:
    """Refresh budget for the timeline poller."""

    min_interval_seconds: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    store: StoreConfig
    display: DisplayConfig
    refresh: RefreshConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = _require_key(data, name, name)
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' config must be a mapping")
    return section


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    token = os.environ.get("SHARED_STORE_TOKEN", "")
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    store_section = _require_section(data, "store")
    display_section = _require_section(data, "display")
    refresh_section = _require_section(data, "refresh")
    logging_section = _require_section(data, "logging")

    backend = _require_key(store_section, "backend", "store")
    if backend not in STORE_BACKENDS:
        raise ValueError(f"Unknown store backend '{backend}', expected one of {STORE_BACKENDS}")
    url = store_section.get("url") or ""
    if backend == "http" and not url:
        raise ValueError("Missing required key 'url' in store config for the http backend")

    store = StoreConfig(
        backend=backend,
        directory=store_section.get("directory", "shared/"),
        suite_name=_require_key(store_section, "suite_name", "store"),
        url=url,
        token=token,
    )

    display = DisplayConfig(
        size=_require_key(display_section, "size", "display"),
        scale=display_section.get("scale", 2),
        timezone=display_section.get("timezone", "UTC"),
    )

    refresh = RefreshConfig(
        min_interval_seconds=_require_key(refresh_section, "min_interval_seconds", "refresh"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(store=store, display=display, refresh=refresh, log=logging)
