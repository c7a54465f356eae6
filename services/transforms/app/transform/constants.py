"""
Transform: static constants and enum types.
"""
import enum
from collections.abc import Mapping
from types import MappingProxyType

from azure.mgmt.media.models import EncoderNamedPreset, InsightsType


class PresetName(str, enum.Enum):
    """Built-in encoder presets accepted in ``builtInStandardEncoderPreset.presetName``."""
    ADAPTIVE_STREAMING = "AdaptiveStreaming"
    H264_MULTIPLE_BITRATE_1080P = "H264MultipleBitrate1080p"
    H264_MULTIPLE_BITRATE_720P = "H264MultipleBitrate720p"
    H264_MULTIPLE_BITRATE_SD = "H264MultipleBitrateSD"
    AAC_GOOD_QUALITY_AUDIO = "AACGoodQualityAudio"


DEFAULT_PRESET_NAME = PresetName.ADAPTIVE_STREAMING

# Preset name → SDK enum. Read-only, built once at import.
ENCODER_PRESETS: Mapping[str, EncoderNamedPreset] = MappingProxyType({
    name.value: EncoderNamedPreset(name.value) for name in PresetName
})

# Video analyzer defaults
DEFAULT_AUDIO_LANGUAGE = "en-US"
DEFAULT_AUDIO_INSIGHTS_ONLY = False

AUDIO_ONLY_INSIGHTS = InsightsType("AudioInsightsOnly")
ALL_INSIGHTS = InsightsType("AllInsights")
