"""
Transform: service layer (get-or-create against Azure Media Services).

One remote read per call and at most one remote write. An existing
Transform with the requested name is assumed to already use the desired
recipe, so it is returned as-is.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.mgmt.media.models import (
    BuiltInStandardEncoderPreset,
    EncoderNamedPreset,
    Transform,
    TransformOutput,
    VideoAnalyzerPreset,
)

from app.exceptions import MissingPreset, MissingTransformName, RemoteApiError
from app.transform.constants import (
    ALL_INSIGHTS,
    AUDIO_ONLY_INSIGHTS,
    DEFAULT_AUDIO_INSIGHTS_ONLY,
    DEFAULT_AUDIO_LANGUAGE,
    DEFAULT_PRESET_NAME,
    ENCODER_PRESETS,
)
from app.transform.schemas import (
    AnalyzerPresetRequest,
    EncoderPresetRequest,
    TransformRequest,
    TransformResponse,
)

if TYPE_CHECKING:
    from azure.mgmt.media import AzureMediaServices

    from app.config import Settings

logger = logging.getLogger(__name__)


def resolve_encoder_preset(preset_name: str | None) -> EncoderNamedPreset:
    """Map a preset name to the SDK enum. Unknown or missing names → AdaptiveStreaming."""
    default = ENCODER_PRESETS[DEFAULT_PRESET_NAME.value]
    if not preset_name:
        return default
    preset = ENCODER_PRESETS.get(preset_name)
    if preset is None:
        logger.info("Unknown encoder preset %r, using %s", preset_name, DEFAULT_PRESET_NAME.value)
        return default
    return preset


def _encoder_output(block: EncoderPresetRequest) -> TransformOutput:
    return TransformOutput(
        preset=BuiltInStandardEncoderPreset(
            preset_name=resolve_encoder_preset(block.preset_name),
        ),
    )


def _analyzer_output(block: AnalyzerPresetRequest) -> TransformOutput:
    audio_language = block.audio_language or DEFAULT_AUDIO_LANGUAGE
    audio_only = (
        block.audio_insights_only
        if block.audio_insights_only is not None
        else DEFAULT_AUDIO_INSIGHTS_ONLY
    )
    return TransformOutput(
        preset=VideoAnalyzerPreset(
            audio_language=audio_language,
            insights_to_extract=AUDIO_ONLY_INSIGHTS if audio_only else ALL_INSIGHTS,
        ),
    )


def build_transform_outputs(request: TransformRequest) -> list[TransformOutput]:
    """Encoder output first, then analyzer output, for whichever blocks are present."""
    outputs: list[TransformOutput] = []
    if request.encoder_preset is not None:
        outputs.append(_encoder_output(request.encoder_preset))
    if request.analyzer_preset is not None:
        outputs.append(_analyzer_output(request.analyzer_preset))
    return outputs


def validate_request(request: TransformRequest) -> str:
    """Check required fields. Returns the transform name."""
    if not request.transform_name:
        raise MissingTransformName()
    if request.encoder_preset is None and request.analyzer_preset is None:
        raise MissingPreset()
    return request.transform_name


def get_transform(
    client: AzureMediaServices,
    settings: Settings,
    transform_name: str,
) -> Transform | None:
    """Fetch a Transform by name. Returns None when the service reports it missing."""
    try:
        return client.transforms.get(
            settings.azure_resource_group,
            settings.azure_media_services_account_name,
            transform_name,
        )
    except ResourceNotFoundError:
        return None


def _remote_error(exc: AzureError) -> RemoteApiError:
    error = getattr(exc, "error", None)
    code = getattr(error, "code", None)
    # exc.message is azure-core's composite "(Code) msg\nCode: ..." text when an ARM body was parsed
    message = getattr(error, "message", None) or getattr(exc, "message", None) or str(exc)
    logger.error("AMS API call failed with error code: %s and message: %s", code, message)
    return RemoteApiError(message, code)


def provision_transform(
    client: AzureMediaServices,
    settings: Settings,
    request: TransformRequest,
) -> TransformResponse:
    """Return the id of the Transform named in the request, creating it if absent."""
    transform_name = validate_request(request)

    try:
        transform = get_transform(client, settings, transform_name)
        if transform is not None:
            logger.info("Transform %s already exists", transform_name)
            return TransformResponse(transform_id=transform.id)

        outputs = build_transform_outputs(request)
        transform = client.transforms.create_or_update(
            settings.azure_resource_group,
            settings.azure_media_services_account_name,
            transform_name,
            Transform(outputs=outputs),
        )
    except AzureError as exc:
        raise _remote_error(exc) from exc

    logger.info("Transform %s created with %d output(s)", transform_name, len(outputs))
    return TransformResponse(transform_id=transform.id)
