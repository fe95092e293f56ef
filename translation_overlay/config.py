"""Runtime settings for the overlay engine, read from the environment."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfigurationError

OUTPUT_WIDTH = 640 * 3
OUTPUT_HEIGHT = 400 * 3
TARGET_ASPECT = 30 / 17
MAX_LINE_LENGTH = 60
LINE_HEIGHT = 56
DEDUP_THRESHOLD = 0.7


class OverlaySettings(BaseSettings):
    """Canvas geometry and text layout knobs for one overlay pass."""

    model_config = SettingsConfigDict(
        env_prefix="OVERLAY_",
        frozen=True,
        env_ignore_empty=True,
        env_parse_none_str="none",
    )

    output_width: int = Field(default=OUTPUT_WIDTH, gt=0)
    output_height: int = Field(default=OUTPUT_HEIGHT, gt=0)
    target_aspect: float = Field(default=TARGET_ASPECT, gt=0, allow_inf_nan=False)
    max_line_length: int = Field(default=MAX_LINE_LENGTH, ge=2)
    line_height: float = Field(default=LINE_HEIGHT, gt=0, allow_inf_nan=False)
    dedup_threshold: float = Field(default=DEDUP_THRESHOLD, ge=0, le=1, allow_inf_nan=False)
    # None keeps the "always take the best region" behaviour.
    min_match_score: Optional[float] = Field(default=None, ge=0, le=1, allow_inf_nan=False)
    fallback_x: float = Field(default=40, allow_inf_nan=False)
    fallback_bottom_offset: float = Field(default=100, allow_inf_nan=False)
    box_margin_x: float = Field(default=20, ge=0, allow_inf_nan=False)
    box_margin_y: float = Field(default=40, ge=0, allow_inf_nan=False)
    font_path: Optional[str] = None
    text_measure: Literal["font", "approximate"] = "font"

    @field_validator("target_aspect", mode="before")
    @classmethod
    def _parse_ratio(cls, value: Any) -> Any:
        # Accept "30/17" as well as a plain number.
        if isinstance(value, str) and "/" in value:
            num, _, den = value.partition("/")
            try:
                return float(num) / float(den)
            except ZeroDivisionError as exc:
                raise ValueError(f"aspect ratio {value!r} has a zero denominator") from exc
        return value

    @property
    def font_size(self) -> float:
        return self.line_height

    @classmethod
    def from_env(cls, **overrides: Any) -> "OverlaySettings":
        """Load settings from ``OVERLAY_*`` variables; keyword overrides win."""
        try:
            return cls(**overrides)
        except ValidationError as exc:
            raise InvalidConfigurationError(f"Invalid overlay settings: {exc}") from exc

    def with_output_size(self, width: int, height: int) -> "OverlaySettings":
        values = self.model_dump()
        values.update(output_width=width, output_height=height)
        return type(self).from_env(**values)


@lru_cache(maxsize=1)
def get_settings() -> OverlaySettings:
    return OverlaySettings.from_env()


__all__ = ["OverlaySettings", "get_settings"]
