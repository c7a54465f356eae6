from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> list[str]:
    """Load .env from repo root (when running from services/transforms) then local .env."""
    base = Path(__file__).resolve().parent.parent.parent.parent  # repo root
    return [str(base / ".env"), ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Azure Media Services account scope ───────────────────────────────────
    azure_subscription_id: str = ""
    azure_resource_group: str = ""
    azure_media_services_account_name: str = ""

    # ── AAD service principal ────────────────────────────────────────────────
    azure_tenant_id: str = ""
    azure_client_id: str = ""
    azure_client_secret: str = ""
    azure_aad_authority: str = "https://login.microsoftonline.com"

    # ARM endpoint; also determines the token scope
    azure_arm_endpoint: str = "https://management.azure.com/"

    # ── CORS ─────────────────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    @property
    def arm_credential_scope(self) -> str:
        return self.azure_arm_endpoint.rstrip("/") + "/.default"


@lru_cache
def get_settings() -> Settings:
    return Settings()
