"""Cruise Countdown display: shared-state snapshot reader and countdown renderer."""

WIDGET_KIND = "CountdownWidget"
DISPLAY_NAME = "Cruise Countdown"
DESCRIPTION = "Shows countdown to your next cruise departure."
