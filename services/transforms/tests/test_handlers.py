import json
from unittest.mock import MagicMock, patch

import azure.functions as func
import pytest
from azure.core.exceptions import HttpResponseError

from app.config import Settings
from handlers.create_transform import main


def _http_request(body: bytes) -> func.HttpRequest:
    return func.HttpRequest(
        method="POST",
        url="/api/create_transform",
        headers={"Content-Type": "application/json"},
        body=body,
    )


@pytest.fixture
def patched(settings: Settings, ams_client: MagicMock):
    factory = MagicMock()
    factory.return_value.__enter__.return_value = ams_client
    factory.return_value.__exit__.return_value = False
    with patch("handlers.create_transform.create_media_services_client", factory), \
            patch("handlers.create_transform.get_settings", return_value=settings):
        yield factory


def _call(payload) -> tuple[int, dict]:
    response = main(_http_request(json.dumps(payload).encode()))
    return response.status_code, json.loads(response.get_body())


def test_create_transform(patched: MagicMock, ams_client: MagicMock) -> None:
    status, body = _call({"transformName": "fn", "builtInStandardEncoderPreset": {"presetName": "AdaptiveStreaming"}})

    assert status == 200
    assert body == {"transformId": ams_client.transforms.create_or_update.return_value.id}
    patched.return_value.__exit__.assert_called_once()


def test_existing_transform(patched: MagicMock, existing_transform: MagicMock) -> None:
    status, body = _call({"transformName": "existing", "videoAnalyzerPreset": {"audioLanguage": "en-GB"}})

    assert status == 200
    assert body["transformId"] == existing_transform.transforms.get.return_value.id
    existing_transform.transforms.create_or_update.assert_not_called()


def test_missing_name(patched: MagicMock) -> None:
    status, body = _call({"videoAnalyzerPreset": {}})

    assert status == 400
    assert "transformName" in body["error"]


def test_missing_preset(patched: MagicMock) -> None:
    status, body = _call({"transformName": "fn"})

    assert status == 400
    assert "preset" in body["error"]


def test_remote_failure(patched: MagicMock, ams_client: MagicMock) -> None:
    ams_client.transforms.create_or_update.side_effect = HttpResponseError(message="Account is disabled")

    status, body = _call({"transformName": "fn", "videoAnalyzerPreset": {}})

    assert status == 400
    assert body["error"].startswith("AMS API call error: ")
    assert "Account is disabled" in body["error"]


def test_invalid_json(patched: MagicMock) -> None:
    response = main(_http_request(b"not-json"))

    assert response.status_code == 400
    assert "error" in json.loads(response.get_body())
    patched.assert_not_called()


def test_non_object_body(patched: MagicMock) -> None:
    status, body = _call(["transformName"])

    assert status == 400
    assert body["error"].startswith("Invalid request body")
    patched.assert_not_called()
