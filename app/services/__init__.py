"""Request handling services"""
from app.services.thumbnail_upload import (
    ThumbnailUploadHandler,
    TokenAuthenticator,
    VideoStore,
    BlobStore,
)

__all__ = ["ThumbnailUploadHandler", "TokenAuthenticator", "VideoStore", "BlobStore"]
