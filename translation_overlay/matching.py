"""Pair translation entries with the OCR region that reads most like them."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, TypeVar

from .filtering import jaro_winkler
from .schema import OCRRegion

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_best_match(items: Sequence[T], score: Callable[[T], float]) -> Optional[T]:
    """Return the highest-scoring item, keeping the first one on ties."""
    if not items:
        return None

    best = items[0]
    best_score = score(best)
    for item in items[1:]:
        current = score(item)
        if current > best_score:
            best, best_score = item, current
    return best


def find_best_region(
    text: str,
    regions: Sequence[OCRRegion],
    similarity: Callable[[str, str], float] = jaro_winkler,
    min_score: Optional[float] = None,
) -> Optional[OCRRegion]:
    """Find the OCR region whose recognized text best matches ``text``.

    Returns ``None`` when there are no regions. With ``min_score`` set, a best
    match scoring below it is also reported as ``None``.
    """
    region = find_best_match(regions, lambda r: similarity(text, r.text))
    if region is None or min_score is None:
        return region

    matched = similarity(text, region.text)
    if matched < min_score:
        logger.debug("Best OCR match %.3f below floor %.3f for %r", matched, min_score, text)
        return None
    return region


__all__ = ["find_best_match", "find_best_region"]
