from typing import Callable

import pytest

from translation_overlay.schema import OCRRegion, TranslationEntry


def _entry(
    translation: str,
    original: str = "",
    original_language: str = "Japanese",
    translation_language: str = "English",
    location: str = "message window",
) -> TranslationEntry:
    return TranslationEntry.model_validate(
        {
            "location": location,
            "original": original or translation,
            "originalLanguage": original_language,
            "translation": translation,
            "translationLanguage": translation_language,
        }
    )


def _region(text: str, x0: float, y0: float, x1: float, y1: float) -> OCRRegion:
    return OCRRegion(text=text, box=((x0, y0), (x1, y0), (x1, y1), (x0, y1)))


@pytest.fixture
def make_entry() -> Callable[..., TranslationEntry]:
    return _entry


@pytest.fixture
def make_region() -> Callable[..., OCRRegion]:
    return _region
