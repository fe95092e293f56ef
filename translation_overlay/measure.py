"""Rendered text width measurement."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Protocol, Union

from PIL import ImageFont

from .config import OverlaySettings

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class TextMeasurer(Protocol):
    def measure(self, text: str) -> float:
        """Return the rendered width of ``text`` in pixels."""
        ...


class ApproximateTextMeasurer:
    """Rough width estimate from character count and font size."""

    def __init__(self, font_size: float, width_factor: float = 0.65) -> None:
        self.font_size = font_size
        self.width_factor = width_factor

    def measure(self, text: str) -> float:
        return len(text) * self.font_size * self.width_factor


class PillowTextMeasurer:
    """Measures text with the same font the rasterizer draws with."""

    def __init__(self, font: Font) -> None:
        self.font = font

    def measure(self, text: str) -> float:
        return float(self.font.getlength(text))


@lru_cache(maxsize=8)
def load_font(path: Optional[str], size: int) -> Font:
    """Load a TrueType/OpenType font, or Pillow's scalable default font."""
    if path:
        logger.info("Loading font %s at %dpx", path, size)
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size=size)


def build_measurer(settings: OverlaySettings) -> TextMeasurer:
    """Pick the width strategy for ``settings``.

    Pillow's built-in fallback is a fixed-size bitmap font when FreeType is
    missing, so unless a font file is configured the estimate is used instead.
    """
    if settings.text_measure == "approximate":
        return ApproximateTextMeasurer(settings.font_size)

    font = load_font(settings.font_path, int(settings.font_size))
    if settings.font_path is None and not isinstance(font, ImageFont.FreeTypeFont):
        logger.warning("Default font is not scalable; estimating text widths")
        return ApproximateTextMeasurer(settings.font_size)
    return PillowTextMeasurer(font)


__all__ = [
    "Font",
    "TextMeasurer",
    "ApproximateTextMeasurer",
    "PillowTextMeasurer",
    "load_font",
    "build_measurer",
]
