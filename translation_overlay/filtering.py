"""Drop untranslated and near-duplicate translation entries."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Callable, Iterable, List, Sequence, TypeVar

from rapidfuzz.distance import JaroWinkler

from .errors import InvalidConfigurationError
from .schema import TranslationEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def jaro_winkler(a: str, b: str) -> float:
    """Jaro-Winkler similarity in [0, 1]; 1 means identical."""
    return JaroWinkler.similarity(a, b)


def filter_untranslated(entries: Iterable[TranslationEntry]) -> List[TranslationEntry]:
    return [entry for entry in entries if not entry.is_untranslated]


def filter_similar_items(
    items: Sequence[T],
    similarity: Callable[[T, T], float],
    threshold: float = 0.7,
) -> List[T]:
    """Keep the first item of every cluster of near-duplicates.

    An item is dropped when its score against any already-kept item is
    ``>= threshold``. Only kept items are compared against.
    """
    if not isinstance(items, (list, tuple)):
        raise InvalidConfigurationError(f"Items must be a list, got {type(items).__name__}")
    if not callable(similarity):
        raise InvalidConfigurationError("Similarity scorer must be callable")
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        raise InvalidConfigurationError(f"Threshold must be a number, got {threshold!r}")

    unique: List[T] = []
    for item in items:
        if any(similarity(item, kept) >= threshold for kept in unique):
            continue
        unique.append(item)
    return unique


def dedupe_translations(
    entries: Sequence[TranslationEntry],
    threshold: float = 0.7,
    similarity: Callable[[str, str], float] = jaro_winkler,
) -> List[TranslationEntry]:
    return filter_similar_items(
        list(entries),
        lambda a, b: similarity(a.translation, b.translation),
        threshold,
    )


def prepare_entries(
    entries: Sequence[TranslationEntry],
    threshold: float = 0.7,
    similarity: Callable[[str, str], float] = jaro_winkler,
) -> List[TranslationEntry]:
    """Run the entry filter followed by the deduplicator."""
    count = len(entries)
    survivors = dedupe_translations(filter_untranslated(entries), threshold, similarity)
    logger.debug("Removed %d/%d dupes / untranslated entries", count - len(survivors), count)
    return survivors


__all__ = [
    "jaro_winkler",
    "filter_untranslated",
    "filter_similar_items",
    "dedupe_translations",
    "prepare_entries",
]
