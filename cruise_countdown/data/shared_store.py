"""Read-only access to the key-value state published by the host app."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

import requests

from cruise_countdown.config import StoreConfig

logger = logging.getLogger(__name__)

KEY_HAS_DATA = "has_data"
KEY_CRUISE_NAME = "cruise_name"
KEY_SHIP_NAME = "ship_name"
KEY_DESTINATION = "destination"
KEY_DEPARTURE_DATE = "departure_date"
KEY_DAYS_REMAINING = "days_remaining"


class SharedStore(Protocol):
    """Anything that can hand back the host app's fields as a mapping."""

    def load(self) -> Mapping[str, Any]:
        ...


class MemoryStore:
    """In-process store, used by previews and tests."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def load(self) -> Mapping[str, Any]:
        return dict(self._values)


class JsonFileStore:
    """JSON object on disk, rewritten wholesale by the host app (last value wins)."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Mapping[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            logger.debug("Shared store %s does not exist yet", self._path)
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Shared store %s is unreadable: %s", self._path, exc)
            return {}

        if not isinstance(data, dict):
            logger.warning("Shared store %s does not hold a JSON object", self._path)
            return {}
        return data


class HttpStore:
    """JSON object served by the host app over HTTP."""

    def __init__(self, url: str, token: str = "", timeout_seconds: float = 5) -> None:
        self._url = url
        self._token = token
        self._timeout_seconds = timeout_seconds

    def load(self) -> Mapping[str, Any]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response = requests.get(self._url, headers=headers, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Shared store request failed: %s", exc)
            return {}

        if response.status_code != 200:
            logger.warning("Shared store request failed: Status %s", response.status_code)
            return {}

        try:
            data = response.json()
        except ValueError:
            logger.warning("Shared store response was not valid JSON")
            return {}

        if not isinstance(data, dict):
            logger.warning("Shared store response is not a JSON object")
            return {}
        return data


def store_from_config(config: StoreConfig) -> SharedStore:
    """Build the store backend named in the config."""
    if config.backend == "http":
        return HttpStore(config.url, token=config.token)
    return JsonFileStore(config.path)


__all__ = [
    "KEY_HAS_DATA",
    "KEY_CRUISE_NAME",
    "KEY_SHIP_NAME",
    "KEY_DESTINATION",
    "KEY_DEPARTURE_DATE",
    "KEY_DAYS_REMAINING",
    "SharedStore",
    "MemoryStore",
    "JsonFileStore",
    "HttpStore",
    "store_from_config",
]
