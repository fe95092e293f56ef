"""Typed structures shared by the overlay modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, TypedDict

Point = Tuple[float, float]


class Rect(TypedDict):
    """Axis-aligned rectangle in output-canvas pixels."""

    x: float
    y: float
    w: float
    h: float


class DrawLine(TypedDict):
    """Single wrapped line with its draw position and tight background."""

    text: str
    x: float
    y: float
    background: Rect


class DrawInstruction(TypedDict):
    """Everything the rasterizer needs to paint one translation entry."""

    background_rect: Optional[Rect]
    lines: List[DrawLine]


@dataclass(frozen=True)
class LayoutCursor:
    """Fallback anchor for entries without a region match."""

    x: float
    y: float

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


__all__ = ["Point", "Rect", "DrawLine", "DrawInstruction", "LayoutCursor"]
