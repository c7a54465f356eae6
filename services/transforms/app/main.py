import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.transform.router import router as transform_router
from shared.middleware import (
    error_envelope_middleware,
    http_exception_handler,
    request_id_middleware,
    validation_exception_handler,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s: %(message)s")


# ── OpenAPI metadata ──────────────────────────────────────────────────────────

_DESCRIPTION = """
## Transform Provisioning Service

Get-or-create Azure Media Services **Transforms** (encoding/analysis recipes).

* **Encoder**: one of the built-in standard encoder presets
  (AdaptiveStreaming, H264MultipleBitrate1080p, H264MultipleBitrate720p,
  H264MultipleBitrateSD, AACGoodQualityAudio).
* **Analyzer**: video analyzer preset with audio language and
  audio-only insights switch.

An existing Transform with the requested name is returned unchanged.

### Error shape
All errors return:
```json
{ "error": "Human-readable message" }
```
"""

_TAGS_METADATA = [
    {
        "name": "transforms",
        "description": "Look up or create Transforms in the configured AMS account.",
    },
]


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Transform Provisioning Service",
        version="1.0.0",
        description=_DESCRIPTION,
        openapi_tags=_TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Middleware (applied in reverse-registration order: last added = outermost)
    app.middleware("http")(error_envelope_middleware)
    app.middleware("http")(request_id_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(transform_router, prefix="/api/v1")

    @app.get("/health", response_model=HealthResponse, tags=["health"], include_in_schema=True)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="transforms")

    return app


app = create_app()
