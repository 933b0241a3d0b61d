"""
FastAPI dependencies built on the application context
"""
import uuid
from typing import Optional

from fastapi import Depends, Header

from app.auth import AuthError, get_bearer_token
from app.context import AppContext, get_context
from app.errors import UnauthenticatedError
from app.services import ThumbnailUploadHandler


async def get_current_user(
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context),
) -> uuid.UUID:
    """
    Resolve the authenticated user from the Authorization header

    Raises:
        UnauthenticatedError: If the token is missing or invalid
    """
    try:
        token = get_bearer_token({"Authorization": authorization} if authorization else {})
        return context.authenticator.validate(token)
    except AuthError as e:
        raise UnauthenticatedError("Couldn't validate JWT", e)


def get_thumbnail_handler(context: AppContext = Depends(get_context)) -> ThumbnailUploadHandler:
    return ThumbnailUploadHandler(
        authenticator=context.authenticator,
        videos=context.videos,
        blobs=context.blobs,
        max_memory=context.settings.THUMBNAIL_MAX_MEMORY,
    )
