"""Database repositories for CRUD operations"""
from .video_repository import VideoRepository, StoreError, VideoNotFoundError

__all__ = [
    "VideoRepository",
    "StoreError",
    "VideoNotFoundError",
]
