"""
Azure Media Services: management client construction.

The client authenticates as an AAD service principal and talks to the ARM
endpoint from settings. Sovereign clouds work by pointing
``AZURE_ARM_ENDPOINT`` and ``AZURE_AAD_AUTHORITY`` at the right hosts.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.identity import ClientSecretCredential
from azure.mgmt.media import AzureMediaServices

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


def _credential(settings: Settings) -> ClientSecretCredential:
    return ClientSecretCredential(
        tenant_id=settings.azure_tenant_id,
        client_id=settings.azure_client_id,
        client_secret=settings.azure_client_secret,
        authority=settings.azure_aad_authority,
    )


def create_media_services_client(settings: Settings) -> AzureMediaServices:
    """Build an AMS management client for the configured subscription."""
    logger.debug(
        "Creating AMS client for subscription %s via %s",
        settings.azure_subscription_id,
        settings.azure_arm_endpoint,
    )
    return AzureMediaServices(
        credential=_credential(settings),
        subscription_id=settings.azure_subscription_id,
        base_url=settings.azure_arm_endpoint,
        credential_scopes=[settings.arm_credential_scope],
    )
