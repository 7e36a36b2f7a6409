"""
API endpoints for video lookup, summarization and saved summaries.
"""
import time
from typing import List

from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_summary_service
from app.core.constants import SuccessMessages
from app.models.api import (
    DeleteResponse,
    MessageResponse,
    SaveSummaryRequest,
    SummarizeResponse,
    SummaryRecordResponse,
    VideoInfoResponse,
    VideoUrlRequest,
)
from app.services.summaries import SummaryService


router = APIRouter()


@router.get("/get_summaries", response_model=List[SummaryRecordResponse])
async def get_summaries(
    summary_service: SummaryService = Depends(get_summary_service),
):
    """
    Lists every saved summary, newest first.

    Returns:
        List[SummaryRecordResponse]: The saved summaries.
    """
    summaries = await summary_service.list_summaries()
    logger.info(f"Fetched {len(summaries)} saved summaries")
    return summaries


@router.delete("/delete_summary/{summary_id}", response_model=DeleteResponse)
async def delete_summary(
    summary_id: str,
    summary_service: SummaryService = Depends(get_summary_service),
):
    """
    Deletes a saved summary. Succeeds even if the id does not exist.

    Args:
        summary_id: The ID of the summary to delete.
        summary_service: The service handling the business logic.
    """
    logger.info(f"Deleting summary {summary_id}")
    await summary_service.delete_summary(summary_id)
    return DeleteResponse(success=True, message=SuccessMessages.DELETED)


@router.post("/get_video_info", response_model=VideoInfoResponse)
async def get_video_info(
    payload: VideoUrlRequest,
    summary_service: SummaryService = Depends(get_summary_service),
):
    """
    Returns title, channel name and thumbnail of the video a URL points to.

    Args:
        payload: The request body containing the video URL.
        summary_service: The service handling the business logic.

    Returns:
        VideoInfoResponse: The video's public snippet.
    """
    logger.info(f"Incoming video info request for URL: {payload.url}")
    metadata = await summary_service.get_video_info(payload.url)
    return VideoInfoResponse.model_validate(metadata.model_dump())


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_video(
    payload: VideoUrlRequest,
    summary_service: SummaryService = Depends(get_summary_service),
):
    """
    Summarizes a YouTube video from its transcript.

    Args:
        payload: The request body containing the video URL.
        summary_service: The service handling the business logic.

    Returns:
        SummarizeResponse: A JSON object containing the generated summary text.
    """
    logger.info(f"Incoming summarize request for URL: {payload.url}")

    start_time = time.perf_counter()
    summary = await summary_service.summarize(payload.url)
    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")
    return SummarizeResponse(summary=summary)


@router.post("/save_summary", response_model=MessageResponse)
async def save_summary(
    payload: SaveSummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service),
):
    """
    Saves a generated summary together with the video's metadata.

    Args:
        payload: URL, title, channel title, thumbnail URL and summary.
        summary_service: The service handling the business logic.
    """
    await summary_service.save_summary(payload)
    return MessageResponse(message=SuccessMessages.SAVED)
