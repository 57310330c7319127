"""Live preview server for the cruise countdown renderer."""

from __future__ import annotations

import argparse
import logging
import threading
import time
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from cruise_countdown import DESCRIPTION, DISPLAY_NAME
from cruise_countdown.config import load_config
from cruise_countdown.data.poller import SnapshotPoller
from cruise_countdown.data.reader import SnapshotReader
from cruise_countdown.data.shared_store import store_from_config
from cruise_countdown.data.timeline import CountdownProvider, Timeline
from cruise_countdown.log import configure_logging
from cruise_countdown.rendering import SizeCategory, compose_frame, render, save_frame

FRAME_PATH = Path("emulator_output/frame.png")

logger = logging.getLogger("live_preview")


class PreviewHandler(BaseHTTPRequestHandler):
    poller: SnapshotPoller | None = None

    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/healthz":
            self._send(200, "text/plain; charset=utf-8", b"ok")
            return

        if self.path == "/frame.png":
            if not FRAME_PATH.exists():
                self._send(404, "text/plain; charset=utf-8", b"no frame yet")
                return
            self._send(200, "image/png", FRAME_PATH.read_bytes())
            return

        if self.path == "/":
            html = f"""<!doctype html>
<html>
  <head>
    <meta http-equiv="refresh" content="10">
    <style>
      body {{ background: #111; color: #fff; font-family: sans-serif; }}
      img {{ border-radius: 24px; }}
    </style>
    <title>{DISPLAY_NAME} Live Preview</title>
  </head>
  <body>
    <h1>{DISPLAY_NAME}</h1>
    <p>{DESCRIPTION}</p>
    <img src="/frame.png" alt="Frame">
  </body>
</html>"""
            self._send(200, "text/html; charset=utf-8", html.encode("utf-8"))
            return

        self._send(404, "text/plain; charset=utf-8", b"not found")

    def do_POST(self) -> None:  # noqa: N802
        # Host app hook: "the shared state changed, reload the timeline".
        if self.path == "/reload" and self.poller is not None:
            self.poller.reload()
            self._send(202, "text/plain; charset=utf-8", b"reloading")
            return
        self._send(404, "text/plain; charset=utf-8", b"not found")

    def _send(self, status: int, content_type: str, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        return


def _run_server(port: int) -> None:
    server = HTTPServer(("0.0.0.0", port), PreviewHandler)
    server.serve_forever()


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--size", default=None, help="compact or standard (defaults to config)")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument(
        "--no-server",
        action="store_true",
        help="Disable preview web server",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log)
    size = SizeCategory.coerce(args.size or config.display.size)
    tz = ZoneInfo(config.display.timezone)

    def on_update(timeline: Timeline) -> None:
        view = render(timeline.current, size, tz=tz)
        save_frame(compose_frame(view, size=size, scale=config.display.scale), str(FRAME_PATH))
        logger.info(
            "preview_update kind=%s as_of=%s reload_after=%s",
            view.kind,
            timeline.current.as_of_time.isoformat(),
            timeline.reload_after.isoformat(),
        )

    provider = CountdownProvider(SnapshotReader(store_from_config(config.store)))
    # Show the placeholder until the first read lands.
    view = render(provider.placeholder(), size, tz=tz)
    save_frame(compose_frame(view, size=size, scale=config.display.scale), str(FRAME_PATH))

    poller = SnapshotPoller(
        provider,
        on_update=on_update,
        min_refresh_seconds=config.refresh.min_interval_seconds,
    )
    PreviewHandler.poller = poller

    if not args.no_server:
        server_thread = threading.Thread(target=_run_server, args=(args.port,), daemon=True)
        server_thread.start()
        logger.info("Preview server listening on port %d", args.port)

    poller.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        poller.stop()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
