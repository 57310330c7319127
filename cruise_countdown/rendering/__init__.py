"""Rendering utilities for the countdown display."""

from cruise_countdown.rendering.composer import compose_frame
from cruise_countdown.rendering.emulator import save_frame
from cruise_countdown.rendering.renderer import render
from cruise_countdown.rendering.view_data import (
    CompactView,
    NoDataView,
    SizeCategory,
    StandardView,
    WidgetView,
)

__all__ = [
    "CompactView",
    "NoDataView",
    "SizeCategory",
    "StandardView",
    "WidgetView",
    "compose_frame",
    "render",
    "save_frame",
]
