"""
Azure Functions HTTP trigger: create_transform

Input:
  {
    "transformName": "Name of the Transform",
    "builtInStandardEncoderPreset": {"presetName": "AdaptiveStreaming"},
    "videoAnalyzerPreset": {"audioInsightsOnly": false, "audioLanguage": "en-US"}
  }

Output:
  {"transformId": "Id of the Transform"}

Supported audio languages (BCP-47): en-US, en-GB, es-ES, es-MX, fr-FR,
it-IT, ja-JP, pt-BR, zh-CN.

Environment variables: see app.config.Settings.

Deployment: the Functions app root is services/transforms (host.json), but
this module also imports the ``shared`` package from shared/shared, which
lives outside that root. Install the repo into the app's environment
(``pip install .`` from the repo root, or list it in the app's
requirements.txt) so ``shared`` is importable at runtime.
"""
from __future__ import annotations

import json
import logging

import azure.functions as func
from fastapi import HTTPException
from pydantic import ValidationError

from app.ams import create_media_services_client
from app.config import get_settings
from app.transform import service
from app.transform.schemas import TransformRequest
from shared.middleware.error_handler import describe_validation_errors

logger = logging.getLogger(__name__)


def main(req: func.HttpRequest) -> func.HttpResponse:
    """Function entry point."""
    logger.info("AMS Function - create_transform was triggered!")

    try:
        payload = req.get_json()
    except ValueError:
        return _json_response({"error": "Request body must be valid JSON"}, 400)

    try:
        request = TransformRequest.model_validate(payload)
    except ValidationError as exc:
        return _json_response({"error": describe_validation_errors(exc.errors())}, 400)

    settings = get_settings()
    try:
        with create_media_services_client(settings) as client:
            result = service.provision_transform(client, settings, request)
    except HTTPException as exc:
        return _json_response({"error": exc.detail}, exc.status_code)

    return _json_response(result.model_dump(by_alias=True), 200)


def _json_response(body: dict, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body),
        status_code=status_code,
        mimetype="application/json",
    )
