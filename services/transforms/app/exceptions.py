"""
Transforms service: domain-specific HTTP exceptions.

All exceptions use preset status codes and detail messages so that callers
never need to specify these at the call site.  The shared HTTP exception
handler renders them as ``{"error": detail}``.
"""
from fastapi import HTTPException, status


# ── Request validation ───────────────────────────────────────────────────────

class InvalidRequest(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class MissingTransformName(InvalidRequest):
    def __init__(self) -> None:
        super().__init__("Please pass transformName in the input object")


class MissingPreset(InvalidRequest):
    def __init__(self) -> None:
        super().__init__("Please pass preset in the input object")


# ── Azure Media Services ─────────────────────────────────────────────────────

class RemoteApiError(HTTPException):
    """A call to the AMS management API failed. Carries the upstream code/message."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"AMS API call error: {message}",
        )
        self.upstream_code = code
        self.upstream_message = message
