"""Map OCR-image coordinates onto the letterboxed output canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidConfigurationError
from .types import Point


@dataclass(frozen=True)
class Viewport:
    """Centered region of the output canvas that keeps the target aspect."""

    offset_x: float
    offset_y: float
    width: float
    height: float


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidConfigurationError(f"{name} must be a positive finite number, got {value}")


def compute_viewport(out_width: float, out_height: float, target_aspect: float) -> Viewport:
    """Fit a ``target_aspect`` (width / height) viewport inside the canvas.

    A canvas wider than the target gets pillarboxed (full height, centered
    horizontally); otherwise it gets letterboxed (full width, centered
    vertically).
    """
    _require_positive(out_width=out_width, out_height=out_height, target_aspect=target_aspect)
    out_aspect = out_width / out_height

    if out_aspect > target_aspect:
        height = float(out_height)
        width = height * target_aspect
        return Viewport((out_width - width) / 2, 0.0, width, height)

    width = float(out_width)
    height = width / target_aspect
    return Viewport(0.0, (out_height - height) / 2, width, height)


def scale_point_ar(
    x: float,
    y: float,
    in_width: float,
    in_height: float,
    out_width: float,
    out_height: float,
    target_aspect: float,
) -> Point:
    """Scale a point into the aspect-preserving viewport of the output canvas.

    Inputs outside ``[0, in_width] x [0, in_height]`` are not clipped.
    """
    _require_positive(in_width=in_width, in_height=in_height)
    view = compute_viewport(out_width, out_height, target_aspect)
    return (
        view.offset_x + x * (view.width / in_width),
        view.offset_y + y * (view.height / in_height),
    )


def unscale_point_ar(
    x: float,
    y: float,
    in_width: float,
    in_height: float,
    out_width: float,
    out_height: float,
    target_aspect: float,
) -> Point:
    """Inverse of :func:`scale_point_ar`."""
    _require_positive(in_width=in_width, in_height=in_height)
    view = compute_viewport(out_width, out_height, target_aspect)
    return (
        (x - view.offset_x) * (in_width / view.width),
        (y - view.offset_y) * (in_height / view.height),
    )


@dataclass(frozen=True)
class CanvasMapping:
    """Input image size, output canvas size and target aspect for one pass."""

    in_width: float
    in_height: float
    out_width: float
    out_height: float
    target_aspect: float

    def __post_init__(self) -> None:
        _require_positive(
            in_width=self.in_width,
            in_height=self.in_height,
            out_width=self.out_width,
            out_height=self.out_height,
            target_aspect=self.target_aspect,
        )

    @property
    def viewport(self) -> Viewport:
        return compute_viewport(self.out_width, self.out_height, self.target_aspect)

    def map_point(self, point: Point) -> Point:
        return scale_point_ar(
            point[0],
            point[1],
            self.in_width,
            self.in_height,
            self.out_width,
            self.out_height,
            self.target_aspect,
        )


__all__ = [
    "Viewport",
    "CanvasMapping",
    "compute_viewport",
    "scale_point_ar",
    "unscale_point_ar",
]
