"""API routers"""
from app.routers import auth, thumbnails, videos

__all__ = ["auth", "thumbnails", "videos"]
