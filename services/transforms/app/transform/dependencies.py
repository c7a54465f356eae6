"""
Transforms service: request-scoped dependencies.

A fresh AMS client per request, closed when the response is sent.
"""
from collections.abc import Iterator

from azure.mgmt.media import AzureMediaServices
from fastapi import Depends

from app.ams import create_media_services_client
from app.config import Settings, get_settings


def get_media_client(
    settings: Settings = Depends(get_settings),
) -> Iterator[AzureMediaServices]:
    client = create_media_services_client(settings)
    try:
        yield client
    finally:
        client.close()
