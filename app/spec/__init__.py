"""
API Specification Models
"""
from app.spec.models import (
    VideoCreateRequest,
    Video,
    TokenResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "VideoCreateRequest",
    "Video",
    "TokenResponse",
    "ErrorDetail",
    "ErrorResponse",
]
