"""
Transform: controller layer.

Receives validated input from router and hands it to the service. The AMS
SDK is blocking, so the call runs in the threadpool.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.concurrency import run_in_threadpool

from app.transform import service
from app.transform.schemas import TransformRequest, TransformResponse

if TYPE_CHECKING:
    from azure.mgmt.media import AzureMediaServices

    from app.config import Settings

logger = logging.getLogger(__name__)


async def create_transform(
    request: TransformRequest,
    client: AzureMediaServices,
    settings: Settings,
) -> TransformResponse:
    """Get-or-create the Transform named in the request."""
    logger.info("create_transform was triggered for %r", request.transform_name)
    return await run_in_threadpool(service.provision_transform, client, settings, request)
