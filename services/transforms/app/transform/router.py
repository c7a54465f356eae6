"""
Transform: HTTP routes.
"""
from __future__ import annotations

from azure.mgmt.media import AzureMediaServices
from fastapi import APIRouter, Depends, status

from app.config import Settings, get_settings
from app.transform import controller
from app.transform.dependencies import get_media_client
from app.transform.schemas import ErrorResponse, TransformRequest, TransformResponse

router = APIRouter(tags=["transforms"])


@router.post(
    "/transforms",
    response_model=TransformResponse,
    status_code=status.HTTP_200_OK,
    summary="Get or create a Transform",
    description=(
        "Returns the id of the Transform named `transformName`. When no such "
        "Transform exists in the account it is created from the given "
        "encoder and/or analyzer preset blocks."
    ),
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_transform(
    request: TransformRequest,
    client: AzureMediaServices = Depends(get_media_client),
    settings: Settings = Depends(get_settings),
) -> TransformResponse:
    return await controller.create_transform(request, client, settings)
