"""Data structures describing a rendered countdown view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

# Named colors resolved to RGB by the composer.
PRIMARY = "primary"
SECONDARY = "secondary"
ACCENT = "accent"

_STANDARD_ALIASES = {"standard", "medium", "systemmedium"}


class SizeCategory(Enum):
    COMPACT = "compact"
    STANDARD = "standard"

    @classmethod
    def coerce(cls, value: Any) -> "SizeCategory":
        """Map any requested size onto a category; unknown sizes fall back to COMPACT."""
        if isinstance(value, SizeCategory):
            return value
        if isinstance(value, str) and value.strip().lower() in _STANDARD_ALIASES:
            return cls.STANDARD
        return cls.COMPACT


@dataclass(frozen=True)
class IconSpec:
    name: str
    size: int
    color: str


@dataclass(frozen=True)
class TextSpec:
    """Single text element; overflow past ``max_lines`` is ellipsized when drawn."""

    text: str
    size: int
    weight: str = "regular"
    color: str = PRIMARY
    max_lines: int = 1
    align: str = "leading"


@dataclass(frozen=True)
class NoDataView:
    icon: IconSpec
    message: TextSpec
    hint: TextSpec
    padding: int

    kind = "no_data"


@dataclass(frozen=True)
class CompactView:
    icon: IconSpec
    days: TextSpec
    caption: TextSpec
    event_name: TextSpec
    vehicle_name: TextSpec
    destination: TextSpec
    padding: int

    kind = "compact"


@dataclass(frozen=True)
class StandardView:
    icon: IconSpec
    days: TextSpec
    caption: TextSpec
    event_name: TextSpec
    vehicle_name: TextSpec
    destination: TextSpec
    footer_icon: IconSpec
    footer_date: TextSpec
    padding: int

    kind = "standard"


WidgetView = Union[NoDataView, CompactView, StandardView]


__all__ = [
    "ACCENT",
    "PRIMARY",
    "SECONDARY",
    "SizeCategory",
    "IconSpec",
    "TextSpec",
    "NoDataView",
    "CompactView",
    "StandardView",
    "WidgetView",
]
