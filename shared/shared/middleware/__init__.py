from shared.middleware.request_id import request_id_middleware
from shared.middleware.error_handler import (
    describe_validation_errors,
    error_envelope_middleware,
    http_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "request_id_middleware",
    "error_envelope_middleware",
    "http_exception_handler",
    "validation_exception_handler",
    "describe_validation_errors",
]
