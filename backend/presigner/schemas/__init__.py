from presigner.schemas.presign import (
    PRESIGNED_URL_TTL_SECONDS,
    ErrorResponse,
    PresignAction,
    PresignRequest,
    PresignResponse,
    SigningParameters,
)

__all__ = [
    "PRESIGNED_URL_TTL_SECONDS",
    "PresignAction",
    "PresignRequest",
    "SigningParameters",
    "PresignResponse",
    "ErrorResponse",
]
