from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID


# Video Models
class VideoCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None


class Video(BaseModel):
    id: UUID
    userId: UUID
    title: str
    description: Optional[str] = None
    thumbnailUrl: Optional[str] = None
    videoUrl: Optional[str] = None
    createdAt: str
    updatedAt: str


# Auth Models
class TokenResponse(BaseModel):
    success: bool
    token: str
    expiresAt: str
    userId: UUID


# Error Models
class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail
