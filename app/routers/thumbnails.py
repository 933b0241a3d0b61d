"""
Thumbnails Router
Handles thumbnail image uploads for videos
"""
from fastapi import APIRouter, Depends, Request

from app.dependencies import get_thumbnail_handler
from app.services import ThumbnailUploadHandler
from app.spec.models import Video, ErrorResponse

router = APIRouter(prefix="/api/thumbnail_upload", tags=["Thumbnails"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

_MULTIPART_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "required": ["thumbnail"],
                    "properties": {
                        "thumbnail": {"type": "string", "format": "binary"},
                    },
                }
            }
        },
    }
}


@router.post(
    "/{video_id}",
    response_model=Video,
    responses=_ERROR_RESPONSES,
    openapi_extra=_MULTIPART_BODY,
)
async def upload_thumbnail(
    video_id: str,
    request: Request,
    handler: ThumbnailUploadHandler = Depends(get_thumbnail_handler),
):
    """
    Thumbnail upload API

    Stores a JPEG or PNG under a random name in the assets directory and
    sets the video's thumbnailUrl to its public URL.

    Authentication: Required (Bearer token, caller must own the video)

    Path Parameters:
    - video_id: Video UUID

    Request:
    - thumbnail: Image file (multipart/form-data, image/jpeg or image/png)

    Response:
    - The updated video record
    """
    return await handler.handle(request)
