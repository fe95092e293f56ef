"""Turn translation entries and OCR regions into draw instructions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Sequence, Tuple

from .config import OverlaySettings
from .filtering import jaro_winkler, prepare_entries
from .geometry import CanvasMapping
from .matching import find_best_region
from .measure import TextMeasurer, build_measurer
from .schema import OCRRegion, TranslationEntry
from .types import DrawInstruction, DrawLine, LayoutCursor, Point, Rect
from .wrapping import normalize_line_text, wrap_text

logger = logging.getLogger(__name__)

Wrapper = Callable[[str], List[str]]
Similarity = Callable[[str, str], float]


@dataclass
class LayoutResult:
    instructions: List[DrawInstruction]
    cursor: LayoutCursor


def initial_cursor(settings: OverlaySettings) -> LayoutCursor:
    return LayoutCursor(settings.fallback_x, settings.output_height - settings.fallback_bottom_offset)


def region_background(top_left: Point, bottom_right: Point, margin_x: float, margin_y: float) -> Rect:
    """Rectangle hiding the original text; twice the box height for longer translations."""
    x, y = top_left
    bottom_x, bottom_y = bottom_right
    top = y - margin_y
    return {
        "x": x - margin_x,
        "y": top,
        "w": (bottom_x + margin_x) - x,
        "h": (bottom_y - top) * 2,
    }


def layout_lines(
    text: str,
    anchor: Point,
    *,
    wrap: Wrapper,
    measurer: TextMeasurer,
    line_height: float,
    margin_x: float,
    margin_y: float,
) -> List[DrawLine]:
    x, y = anchor
    lines: List[DrawLine] = []
    for raw in wrap(text):
        line_text = normalize_line_text(raw)
        lines.append(
            {
                "text": line_text,
                "x": x,
                "y": y,
                "background": {
                    "x": x - margin_x,
                    "y": y - margin_y,
                    "w": measurer.measure(line_text),
                    "h": line_height,
                },
            }
        )
        y += line_height
    return lines


def layout_entry(
    entry: TranslationEntry,
    regions: Sequence[OCRRegion],
    mapping: CanvasMapping,
    cursor: LayoutCursor,
    settings: OverlaySettings,
    measurer: TextMeasurer,
    *,
    wrap: Optional[Wrapper] = None,
    similarity: Similarity = jaro_winkler,
) -> Tuple[DrawInstruction, LayoutCursor]:
    """Lay out one entry and return it with the cursor for the next entry."""
    if wrap is None:
        wrap = partial(wrap_text, max_len=settings.max_line_length)

    region = find_best_region(entry.original, regions, similarity, settings.min_match_score)
    background: Optional[Rect] = None
    if region is None:
        logger.debug("OCR error, reusing previous coordinates (%.1f, %.1f)", cursor.x, cursor.y)
    else:
        logger.debug("Found OCR segment: %s %s", region.top_left[0], region.top_left[1])
        logger.debug("OCR text: %s", region.text)
        top_left = mapping.map_point(region.top_left)
        bottom_right = mapping.map_point(region.bottom_right)
        cursor = LayoutCursor(*top_left)
        background = region_background(
            top_left, bottom_right, settings.box_margin_x, settings.box_margin_y
        )
        logger.debug("scaled OCR X: %s Y: %s", cursor.x, cursor.y)

    logger.debug("LLM translation: %s", entry.translation)
    lines = layout_lines(
        entry.translation,
        (cursor.x, cursor.y),
        wrap=wrap,
        measurer=measurer,
        line_height=settings.line_height,
        margin_x=settings.box_margin_x,
        margin_y=settings.box_margin_y,
    )
    return {"background_rect": background, "lines": lines}, cursor


def layout_entries(
    entries: Sequence[TranslationEntry],
    regions: Sequence[OCRRegion],
    mapping: CanvasMapping,
    settings: OverlaySettings,
    measurer: TextMeasurer,
    cursor: Optional[LayoutCursor] = None,
    *,
    wrap: Optional[Wrapper] = None,
    similarity: Similarity = jaro_winkler,
) -> LayoutResult:
    """Lay out entries in order, threading the fallback cursor between them."""
    if cursor is None:
        cursor = initial_cursor(settings)

    instructions: List[DrawInstruction] = []
    for entry in entries:
        instruction, cursor = layout_entry(
            entry,
            regions,
            mapping,
            cursor,
            settings,
            measurer,
            wrap=wrap,
            similarity=similarity,
        )
        instructions.append(instruction)
    return LayoutResult(instructions=instructions, cursor=cursor)


def build_overlay(
    entries: Sequence[TranslationEntry],
    regions: Sequence[OCRRegion],
    input_size: Tuple[float, float],
    settings: OverlaySettings,
    measurer: Optional[TextMeasurer] = None,
    cursor: Optional[LayoutCursor] = None,
) -> LayoutResult:
    """Filter, dedupe and lay out one image's translations."""
    survivors = prepare_entries(entries, settings.dedup_threshold)
    mapping = CanvasMapping(
        in_width=input_size[0],
        in_height=input_size[1],
        out_width=settings.output_width,
        out_height=settings.output_height,
        target_aspect=settings.target_aspect,
    )
    return layout_entries(
        survivors,
        regions,
        mapping,
        settings,
        measurer or build_measurer(settings),
        cursor,
    )


__all__ = [
    "LayoutResult",
    "initial_cursor",
    "region_background",
    "layout_lines",
    "layout_entry",
    "layout_entries",
    "build_overlay",
]
