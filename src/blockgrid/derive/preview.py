"""Top-down preview images of a layout in scene space."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageColor, ImageDraw

from blockgrid.derive.layout import LedDescriptor
from blockgrid.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PREVIEW_SIZE = 512
DEFAULT_PREVIEW_MARGIN = 32
BACKGROUND_COLOR = (30, 30, 30)
WIRING_COLOR = (80, 80, 80)
LED_RADIUS = 4


def angle_color(block_angle: float) -> tuple[int, int, int]:
    hue = round(math.degrees(block_angle)) % 360
    return ImageColor.getrgb(f"hsv({hue}, 100%, 100%)")


def render_preview(
    layout: Sequence[LedDescriptor],
    *,
    size: int = DEFAULT_PREVIEW_SIZE,
    margin: int = DEFAULT_PREVIEW_MARGIN,
) -> Image.Image:
    """Draw the scene plane (``point.x`` across, ``point.z`` down).

    LEDs are coloured by ``block_angle`` and joined in wiring order.
    """

    if not layout:
        raise ValueError("Expected at least one LED to render a preview.")

    xs = [led.point.x for led in layout]
    zs = [led.point.z for led in layout]
    min_x, min_z = min(xs), min(zs)
    span = max(max(xs) - min_x, max(zs) - min_z) or 1.0
    scale = (size - 2 * margin) / span

    def to_pixel(led: LedDescriptor) -> tuple[float, float]:
        return (
            margin + (led.point.x - min_x) * scale,
            margin + (led.point.z - min_z) * scale,
        )

    image = Image.new("RGB", (size, size), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    pixels = [to_pixel(led) for led in layout]
    if len(pixels) > 1:
        draw.line(pixels, fill=WIRING_COLOR, width=1)

    for led, (px, py) in zip(layout, pixels):
        draw.ellipse(
            [(px - LED_RADIUS, py - LED_RADIUS), (px + LED_RADIUS, py + LED_RADIUS)],
            fill=angle_color(led.block_angle),
        )
    return image


def save_preview(
    layout: Sequence[LedDescriptor],
    path: Path,
    *,
    size: int = DEFAULT_PREVIEW_SIZE,
) -> Path:
    image = render_preview(layout, size=size)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    logger.info("Wrote %d LED preview to %s", len(layout), path)
    return path
