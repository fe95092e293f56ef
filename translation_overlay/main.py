"""FastAPI server laying out translated text over OCR regions."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests
from fastapi import FastAPI, HTTPException
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, Field

from .config import get_settings
from .errors import InvalidConfigurationError, MalformedEntryError
from .layout import build_overlay
from .logging_config import configure_logging
from .render import render_overlay_png
from .schema import OCRRegion, TranslationEntry, parse_translation_list

logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(title="Translation Overlay API", version="0.1.0")


class Size(BaseModel):
    w: int = Field(..., ge=1)
    h: int = Field(..., ge=1)


class OverlayRequest(BaseModel):
    translations: Optional[List[TranslationEntry]] = None
    translations_json: Optional[str] = Field(
        default=None, description="Raw structured output from the translation model"
    )
    regions: List[OCRRegion] = Field(default_factory=list)
    input_size: Optional[Size] = None
    image_url: Optional[str] = None
    image_b64: Optional[str] = None
    output_size: Optional[Size] = None
    render: bool = False

    def load_bytes(self) -> bytes:
        if self.image_b64:
            try:
                _, data = self.image_b64.split(",", 1)
            except ValueError:
                data = self.image_b64
            try:
                return base64.b64decode(data, validate=True)
            except binascii.Error as exc:
                raise HTTPException(status_code=400, detail="image_b64 is not valid base64") from exc
        if self.image_url:
            logger.info("Fetching image from %s", self.image_url)
            response = requests.get(self.image_url, timeout=20)
            if not response.ok:
                raise HTTPException(status_code=502, detail="Failed to fetch image URL")
            return response.content
        raise HTTPException(status_code=400, detail="Provide input_size, image_url or image_b64")

    def resolve_input_size(self) -> Tuple[int, int]:
        if self.input_size is not None:
            return self.input_size.w, self.input_size.h
        try:
            with Image.open(io.BytesIO(self.load_bytes())) as im:
                return im.size
        except UnidentifiedImageError as exc:
            raise HTTPException(status_code=400, detail="Image data is not a readable image") from exc

    def entries(self) -> List[TranslationEntry]:
        if self.translations is not None:
            return list(self.translations)
        if self.translations_json is not None:
            return parse_translation_list(self.translations_json)
        raise HTTPException(status_code=400, detail="Provide translations or translations_json")


@app.post("/overlay")
def overlay(req: OverlayRequest) -> Dict[str, Any]:
    try:
        entries = req.entries()
        settings = get_settings()
        if req.output_size is not None:
            settings = settings.with_output_size(req.output_size.w, req.output_size.h)
        input_size = req.resolve_input_size()
        result = build_overlay(entries, req.regions, input_size, settings)
    except MalformedEntryError as exc:
        logger.warning("Rejected translation payload: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except InvalidConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.debug("Laid out %d of %d entries", len(result.instructions), len(entries))
    response: Dict[str, Any] = {
        "input_size": {"w": input_size[0], "h": input_size[1]},
        "output_size": {"w": settings.output_width, "h": settings.output_height},
        "instructions": result.instructions,
        "cursor": result.cursor.as_dict(),
    }
    if req.render:
        response["image"] = render_overlay_png(result.instructions, settings)
    return response


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


def serve() -> None:
    """Run the API under uvicorn with the package logging config."""
    import uvicorn

    configure_logging()
    host = os.getenv("OVERLAY_HOST", "0.0.0.0")
    port = int(os.getenv("OVERLAY_PORT", "4404"))
    logger.info("Server starting at %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)
