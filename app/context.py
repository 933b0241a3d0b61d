"""
Application context
Collaborators shared by every request, built once at startup and injected
into routes instead of living in module globals.
"""
from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request

from config.settings import Settings
from database import DatabaseConnection
from database.repositories import VideoRepository
from app.auth import JWTAuthenticator
from app.storage import LocalBlobStore


@dataclass
class AppContext:
    settings: Settings
    db: DatabaseConnection
    authenticator: JWTAuthenticator
    videos: VideoRepository
    blobs: LocalBlobStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        """
        Wire the default collaborators from settings

        Nothing is opened or created here; the database connects lazily and
        the assets root is created at startup.
        """
        db = DatabaseConnection(settings.DATABASE_PATH)
        return cls(
            settings=settings,
            db=db,
            authenticator=JWTAuthenticator(
                secret_key=settings.JWT_SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
                issuer=settings.JWT_ISSUER,
                expires_in=timedelta(hours=settings.JWT_EXPIRATION_HOURS),
            ),
            videos=VideoRepository(db),
            blobs=LocalBlobStore(settings.ASSETS_ROOT, settings.ASSETS_BASE_URL),
        )


def get_context(request: Request) -> AppContext:
    """Dependency returning the context attached to the running app"""
    return request.app.state.context
