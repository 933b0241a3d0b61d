"""
Thumbnail Upload Service
Validates an uploaded thumbnail, stores it and records its URL on the video.

Flow (every failure ends the request):
1. Parse the video id and authenticate the bearer token
2. Parse the multipart form and read the "thumbnail" part
3. Accept only image/jpeg and image/png
4. Load the video and check the caller owns it
5. Write the bytes under a random name, then point the video at its URL

The file is fully written before the video is updated. If the update fails
the file stays on disk.
"""
import logging
import mimetypes
import secrets
import uuid
from typing import BinaryIO, Protocol

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile

from app.auth import AuthError, get_bearer_token
from app.errors import (
    InternalError,
    InvalidArgumentError,
    UnauthenticatedError,
    UnauthorizedError,
)
from app.spec.models import Video
from app.utils import parse_media_type, utc_now
from database.repositories import StoreError, VideoNotFoundError

logger = logging.getLogger(__name__)

MAX_MEMORY = 10 << 20  # 10 MiB
THUMBNAIL_FIELD = "thumbnail"
ALLOWED_MEDIA_TYPES = {"image/jpeg", "image/png"}
FILENAME_RANDOM_BYTES = 32


class TokenAuthenticator(Protocol):
    def validate(self, token: str) -> uuid.UUID: ...


class VideoStore(Protocol):
    def get(self, video_id: uuid.UUID) -> Video: ...

    def update(self, video: Video) -> None: ...


class BlobStore(Protocol):
    def url_for(self, name: str) -> str: ...

    def write(self, name: str, source: BinaryIO) -> int: ...


def random_filename(extension: str) -> str:
    """URL-safe name from 32 random bytes, so the original filename never leaks"""
    return secrets.token_urlsafe(FILENAME_RANDOM_BYTES) + extension


class ThumbnailUploadHandler:
    """Handles POST /api/thumbnail_upload/{video_id}"""

    def __init__(
        self,
        authenticator: TokenAuthenticator,
        videos: VideoStore,
        blobs: BlobStore,
        max_memory: int = MAX_MEMORY,
    ):
        self.authenticator = authenticator
        self.videos = videos
        self.blobs = blobs
        self.max_memory = max_memory

    async def handle(self, request: Request) -> Video:
        """
        Run the upload for one request

        Args:
            request: Request carrying the video_id path parameter, an
                Authorization header and a multipart body

        Returns:
            Video: The updated video record

        Raises:
            InvalidArgumentError: Bad id, missing file, bad type, unknown video
            UnauthenticatedError: Missing or invalid bearer token
            UnauthorizedError: Caller does not own the video
            InternalError: Form parsing, file write or datastore failure
        """
        try:
            video_id = uuid.UUID(str(request.path_params.get("video_id")))
        except ValueError as e:
            raise InvalidArgumentError("Invalid ID", e)

        try:
            token = get_bearer_token(request.headers)
        except AuthError as e:
            raise UnauthenticatedError("Couldn't find JWT", e)

        try:
            user_id = self.authenticator.validate(token)
        except AuthError as e:
            raise UnauthenticatedError("Couldn't validate JWT", e)

        logger.info(f"uploading thumbnail for video {video_id} by user {user_id}")

        try:
            body_type = parse_media_type(request.headers.get("content-type"))
        except ValueError as e:
            raise InternalError("Couldn't parse form", e)
        if body_type != "multipart/form-data":
            raise InternalError(
                "Couldn't parse form", ValueError(f"request body is not multipart: {body_type}")
            )

        try:
            form = await request.form(max_part_size=self.max_memory)
        except Exception as e:
            raise InternalError("Couldn't parse form", e)

        try:
            return await self._store_thumbnail(form, video_id, user_id)
        finally:
            await form.close()

    async def _store_thumbnail(
        self, form: FormData, video_id: uuid.UUID, user_id: uuid.UUID
    ) -> Video:
        upload = form.get(THUMBNAIL_FIELD)
        if not isinstance(upload, UploadFile):
            raise InvalidArgumentError("Error retrieving file")

        try:
            media_type = parse_media_type(upload.content_type)
        except ValueError as e:
            raise InvalidArgumentError("Invalid Content-Type", e)

        if media_type not in ALLOWED_MEDIA_TYPES:
            raise InvalidArgumentError("Invalid format")

        try:
            video = self.videos.get(video_id)
        except VideoNotFoundError as e:
            raise InvalidArgumentError("Unable to find video", e)
        except StoreError as e:
            raise InternalError("Couldn't fetch video", e)

        if video.userId != user_id:
            raise UnauthorizedError("Unauthorized user")

        extension = mimetypes.guess_extension(media_type)
        if not extension:
            raise InvalidArgumentError("Unsupported Media Type")

        filename = random_filename(extension)
        thumbnail_url = self.blobs.url_for(filename)

        try:
            await upload.seek(0)
            size = await run_in_threadpool(self.blobs.write, filename, upload.file)
        except OSError as e:
            raise InternalError("Couldn't save thumbnail", e)

        updated = video.model_copy(
            update={"thumbnailUrl": thumbnail_url, "updatedAt": utc_now()}
        )

        # No version check: concurrent uploads for one video are last-writer-wins
        try:
            self.videos.update(updated)
        except StoreError as e:
            raise InternalError("Couldn't update video", e)

        logger.info(f"Thumbnail stored: video_id={video_id}, file={filename}, size={size}")
        return updated
