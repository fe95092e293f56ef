"""Schema boundary for translation-model and OCR output."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import MalformedEntryError
from .types import Point

# Structured-output schema handed to the translation model.
TRANSLATION_ENTRY_JSON_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "location": {"type": "string"},
        "original": {"type": "string"},
        "originalLanguage": {"type": "string"},
        "translation": {"type": "string"},
        "translationLanguage": {"type": "string"},
    },
    "required": [
        "location",
        "original",
        "originalLanguage",
        "translation",
        "translationLanguage",
    ],
    "additionalProperties": False,
}

TRANSLATION_LIST_JSON_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "items": TRANSLATION_ENTRY_JSON_SCHEMA,
}


class TranslationEntry(BaseModel):
    """One original/translation pair as emitted by the translation model."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True, populate_by_name=True)

    location: str
    original: str
    original_language: str = Field(alias="originalLanguage")
    translation: str
    translation_language: str = Field(alias="translationLanguage")

    @property
    def is_untranslated(self) -> bool:
        return self.original_language == self.translation_language


class OCRRegion(BaseModel):
    """Detected text polygon (TL, TR, BR, BL) in input-image pixels."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    box: Tuple[Point, Point, Point, Point]

    @property
    def top_left(self) -> Point:
        return self.box[0]

    @property
    def bottom_right(self) -> Point:
        return self.box[2]


_ENTRY_LIST_ADAPTER: TypeAdapter[List[TranslationEntry]] = TypeAdapter(List[TranslationEntry])


def parse_translation_list(raw: Any) -> List[TranslationEntry]:
    """Validate translation output against the entry schema.

    ``raw`` may be the JSON text returned by the model or already-decoded
    Python data. Any shape mismatch raises :class:`MalformedEntryError`;
    fields are never defaulted or coerced.
    """

    if isinstance(raw, (str, bytes, bytearray)):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedEntryError(f"Translation output is not valid JSON: {exc}") from exc
    else:
        data = raw

    try:
        return _ENTRY_LIST_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise MalformedEntryError(
            f"Translation output does not match schema ({exc.error_count()} errors): {exc}"
        ) from exc


__all__ = [
    "TRANSLATION_ENTRY_JSON_SCHEMA",
    "TRANSLATION_LIST_JSON_SCHEMA",
    "TranslationEntry",
    "OCRRegion",
    "parse_translation_list",
]
