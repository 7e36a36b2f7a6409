"""
Pydantic models for API request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class VideoUrlRequest(BaseModel):
    """Request body carrying a YouTube URL."""

    url: Optional[str] = None


class VideoInfoResponse(BaseModel):
    """Public snippet of a video."""

    title: str
    channel_title: str
    thumbnail_url: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class SummarizeResponse(BaseModel):
    summary: str

    model_config = ConfigDict(frozen=True)


class SaveSummaryRequest(BaseModel):
    """
    Request model for persisting a summary.

    Fields are optional at the schema level so that a missing field is
    reported as a 400 by the service rather than a validation error.
    """

    url: Optional[str] = None
    title: Optional[str] = None
    channel_title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    summary: Optional[str] = None

    def missing_fields(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if not value]


class SummaryRecordResponse(BaseModel):
    """Response model for a saved summary."""

    id: int
    youtube_url: str
    title: str
    channel_title: str
    thumbnail_url: str
    summary: str
    timestamp: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str

    model_config = ConfigDict(frozen=True)


class DeleteResponse(BaseModel):
    success: bool
    message: str

    model_config = ConfigDict(frozen=True)
