"""Render a single countdown frame from the shared store or the placeholder."""

from __future__ import annotations

import argparse
import logging
from zoneinfo import ZoneInfo

from cruise_countdown import DISPLAY_NAME
from cruise_countdown.config import load_config
from cruise_countdown.data.reader import SnapshotReader
from cruise_countdown.data.shared_store import store_from_config
from cruise_countdown.data.timeline import CountdownProvider
from cruise_countdown.log import configure_logging
from cruise_countdown.rendering import SizeCategory, compose_frame, render, save_frame

logger = logging.getLogger("render_preview")


def main() -> int:
    parser = argparse.ArgumentParser(description=f"{DISPLAY_NAME} preview renderer")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--size", default=None, help="compact or standard (defaults to config)")
    parser.add_argument(
        "--placeholder",
        action="store_true",
        help="Render the built-in example snapshot instead of reading the store",
    )
    parser.add_argument("--output", default="emulator_output/frame.png")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log)

    provider = CountdownProvider(SnapshotReader(store_from_config(config.store)))
    snapshot = provider.placeholder() if args.placeholder else provider.get_snapshot()

    size = SizeCategory.coerce(args.size or config.display.size)
    view = render(snapshot, size, tz=ZoneInfo(config.display.timezone))
    frame = compose_frame(view, size=size, scale=config.display.scale)
    path = save_frame(frame, args.output)
    logger.info("Rendered %s view (%s) to %s", view.kind, size.value, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
