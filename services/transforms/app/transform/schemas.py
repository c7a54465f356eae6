"""
Transform: Pydantic V2 request/response schemas.

Field names are snake_case in Python; the wire uses the camelCase aliases.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ── Base ─────────────────────────────────────────────────────────────────────

class _Base(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        extra="ignore",
    )


# ── Requests ─────────────────────────────────────────────────────────────────

class EncoderPresetRequest(_Base):
    """Built-in standard encoder block. Unknown names fall back to AdaptiveStreaming."""
    preset_name: str | None = Field(
        default=None,
        alias="presetName",
        max_length=100,
        description="Built-in encoder preset name (default: AdaptiveStreaming)",
    )


class AnalyzerPresetRequest(_Base):
    """Video analyzer block."""
    audio_insights_only: bool | None = Field(
        default=None,
        alias="audioInsightsOnly",
        description="Only extract audio insights when processing a video file",
    )
    audio_language: str | None = Field(
        default=None,
        alias="audioLanguage",
        max_length=20,
        description="BCP-47 'language tag-region' of the audio, e.g. en-US",
    )


class TransformRequest(_Base):
    """Get-or-create a Transform. Presence checks happen in the service layer."""
    transform_name: str | None = Field(
        default=None,
        alias="transformName",
        max_length=260,
        description="Name of the Transform",
    )
    encoder_preset: EncoderPresetRequest | None = Field(
        default=None, alias="builtInStandardEncoderPreset",
    )
    analyzer_preset: AnalyzerPresetRequest | None = Field(
        default=None, alias="videoAnalyzerPreset",
    )


# ── Responses ────────────────────────────────────────────────────────────────

class TransformResponse(_Base):
    transform_id: str | None = Field(default=None, alias="transformId")


class ErrorResponse(BaseModel):
    error: str
