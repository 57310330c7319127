"""Frame output helpers for previewing the countdown display."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

DEFAULT_FRAME_PATH = "emulator_output/frame.png"


def save_frame(image: Image.Image, path: str = DEFAULT_FRAME_PATH) -> Path:
    """Save a frame to disk as a PNG image, returning where it was written."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # The preview server reads this path concurrently; replace it atomically.
    tmp_path = output_path.with_suffix(output_path.suffix + ".tmp")
    image.save(tmp_path, format="PNG")
    tmp_path.replace(output_path)
    return output_path


__all__ = ["DEFAULT_FRAME_PATH", "save_frame"]
