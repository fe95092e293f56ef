"""Translation overlay engine and API package."""

from fastapi import FastAPI

from .layout import LayoutResult, build_overlay
from .main import app as _app
from .schema import OCRRegion, TranslationEntry, parse_translation_list

app: FastAPI = _app

__all__ = [
    "app",
    "build_overlay",
    "LayoutResult",
    "OCRRegion",
    "TranslationEntry",
    "parse_translation_list",
]
