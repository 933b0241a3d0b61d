"""
Videos Router
Handles video metadata operations
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, Response

from app.context import AppContext, get_context
from app.dependencies import get_current_user
from app.errors import InternalError, InvalidArgumentError, NotFoundError, UnauthorizedError
from app.spec.models import Video, VideoCreateRequest
from app.utils import utc_now
from database.repositories import StoreError, VideoNotFoundError

router = APIRouter(prefix="/api/videos", tags=["Videos"])
logger = logging.getLogger(__name__)


def _parse_video_id(video_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(video_id)
    except ValueError as e:
        raise InvalidArgumentError("Invalid ID", e)


def _load_video(context: AppContext, video_id: uuid.UUID) -> Video:
    try:
        return context.videos.get(video_id)
    except VideoNotFoundError as e:
        raise NotFoundError("Video not found", e)
    except StoreError as e:
        raise InternalError("Couldn't get video", e)


@router.post("", response_model=Video, status_code=201)
async def create_video(
    request: VideoCreateRequest,
    user_id: uuid.UUID = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """
    Video draft creation API

    Creates a video record owned by the caller. Media URLs start empty.

    Authentication: Required (Bearer token)
    """
    now = utc_now()
    video = Video(
        id=uuid.uuid4(),
        userId=user_id,
        title=request.title,
        description=request.description,
        createdAt=now,
        updatedAt=now,
    )

    try:
        context.videos.create(video)
    except StoreError as e:
        raise InternalError("Couldn't create video", e)

    logger.info(f"Video created: video_id={video.id}, user_id={user_id}")
    return video


@router.get("", response_model=List[Video])
async def list_videos(
    user_id: uuid.UUID = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """
    List the caller's videos, newest first

    Authentication: Required (Bearer token)
    """
    try:
        return context.videos.list_by_user(user_id)
    except StoreError as e:
        raise InternalError("Couldn't retrieve videos", e)


@router.get("/{video_id}", response_model=Video)
async def get_video(
    video_id: str,
    user_id: uuid.UUID = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """
    Video lookup API

    Only the owner may read a video record.

    Authentication: Required (Bearer token)
    """
    video = _load_video(context, _parse_video_id(video_id))

    if video.userId != user_id:
        raise UnauthorizedError("You can't view this video")

    return video


@router.delete("/{video_id}", status_code=204)
async def delete_video(
    video_id: str,
    user_id: uuid.UUID = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """
    Video deletion API

    Only the owner may delete. Stored asset files are left in place.

    Authentication: Required (Bearer token)
    """
    video = _load_video(context, _parse_video_id(video_id))

    if video.userId != user_id:
        raise UnauthorizedError("You can't delete this video")

    try:
        context.videos.delete(video.id)
    except StoreError as e:
        raise InternalError("Couldn't delete video", e)

    logger.info(f"Video deleted: video_id={video.id}, user_id={user_id}")
    return Response(status_code=204)
