"""Pillow rasterizer for draw instructions."""

from __future__ import annotations

import base64
import io
import logging
from typing import Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .config import OverlaySettings
from .measure import Font, load_font
from .types import DrawInstruction, Rect

logger = logging.getLogger(__name__)

BACKGROUND_FILL = (0, 0, 0, 0xDE)
TEXT_FILL = (0, 255, 255, 255)
STROKE_FILL = (0, 0, 0, 255)
STROKE_WIDTH = 12


def _bounds(rect: Rect) -> Tuple[float, float, float, float]:
    x0, x1 = sorted((rect["x"], rect["x"] + rect["w"]))
    y0, y1 = sorted((rect["y"], rect["y"] + rect["h"]))
    return (x0, y0, x1, y1)


def render_instructions(
    instructions: Sequence[DrawInstruction],
    size: Tuple[int, int],
    font: Font,
) -> Image.Image:
    """Paint backgrounds and outlined text onto a transparent canvas."""
    image = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(image, "RGBA")
    # Text positions are baselines; only FreeType fonts honour anchors.
    anchor = "ls" if isinstance(font, ImageFont.FreeTypeFont) else None

    for instruction in instructions:
        if instruction["background_rect"] is not None:
            draw.rectangle(_bounds(instruction["background_rect"]), fill=BACKGROUND_FILL)
        for line in instruction["lines"]:
            draw.rectangle(_bounds(line["background"]), fill=BACKGROUND_FILL)
            draw.text(
                (line["x"], line["y"]),
                line["text"],
                font=font,
                fill=TEXT_FILL,
                stroke_width=STROKE_WIDTH,
                stroke_fill=STROKE_FILL,
                anchor=anchor,
            )
    return image


def encode_png_base64(image: Image.Image) -> str:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


def render_overlay_png(instructions: Sequence[DrawInstruction], settings: OverlaySettings) -> str:
    """Rasterize instructions at the configured canvas size, as base64 PNG."""
    font = load_font(settings.font_path, int(settings.font_size))
    image = render_instructions(
        instructions, (settings.output_width, settings.output_height), font
    )
    logger.debug("Rendered %d instructions onto %sx%s canvas", len(instructions), *image.size)
    return encode_png_base64(image)


__all__ = ["render_instructions", "encode_png_base64", "render_overlay_png"]
