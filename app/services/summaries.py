"""
Summary service orchestrating video lookup, summarization and persistence.

Each public method backs one endpoint and translates component failures
into AppException subclasses carrying the user-facing message.
"""
from typing import List, Optional

from loguru import logger
from app.core.constants import ErrorMessages
from app.core.db import DATABASE_ERRORS
from app.core.exceptions import (
    BadRequestError,
    InternalServerError,
    NotFoundError,
    TranscriptFetchError,
    UpstreamServiceError,
)
from app.models import SaveSummaryRequest, Video, VideoMetadata
from app.models.enums import TranscriptErrorKind
from app.models.sql import SummaryModel
from app.repositories.summary import SummaryRepository
from app.services.summarization import SummarizationService
from app.services.youtube import YouTubeService, extract_video_id


class SummaryService:
    """
    Service behind the summarizer API.

    This service orchestrates:
    1. Video metadata lookup
    2. Transcript fetching and summarization
    3. Saving, listing and deleting summaries
    """

    def __init__(
        self,
        youtube_service: YouTubeService,
        summarization_service: SummarizationService,
        summary_repository: SummaryRepository,
    ):
        """
        Initialize the SummaryService.

        Args:
            youtube_service: Service for YouTube operations.
            summarization_service: Service for transcript summarization.
            summary_repository: Repository for saved summaries.
        """
        self.youtube_service = youtube_service
        self.summarization_service = summarization_service
        self.summary_repository = summary_repository

    async def get_video_info(self, url: Optional[str]) -> VideoMetadata:
        """
        Look up the public snippet of the video a URL points to.

        Raises:
            BadRequestError: The URL holds no video ID.
            NotFoundError: YouTube knows no such video.
            InternalServerError: The YouTube Data API call failed.
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise BadRequestError(ErrorMessages.INVALID_URL)

        try:
            metadata = await self.youtube_service.get_video_metadata(video_id)
        except UpstreamServiceError as e:
            logger.error(f"Metadata lookup failed for {video_id}: {e}")
            raise InternalServerError(ErrorMessages.METADATA_API_FAILED) from e

        if metadata is None:
            raise NotFoundError(ErrorMessages.VIDEO_NOT_FOUND)
        return metadata

    async def summarize(self, url: Optional[str]) -> str:
        """
        Fetch a video's transcript and summarize it.

        Flow:
        1. Extract the video ID
        2. Fetch the transcript
        3. Join segment texts with spaces
        4. Summarize

        Raises:
            BadRequestError: The URL holds no video ID.
            InternalServerError: Transcript or summarization failure, with a
                message specific to the failure category.
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise BadRequestError(ErrorMessages.VIDEO_ID_NOT_FOUND)

        try:
            transcript = await self.youtube_service.fetch_transcript(video_id)
        except TranscriptFetchError as e:
            raise InternalServerError(self._transcript_error_message(e)) from e

        video = Video(id=video_id, transcript=transcript)
        result = await self.summarization_service.summarize(video.full_text)
        if not result.success:
            raise InternalServerError(
                ErrorMessages.SUMMARIZATION_FAILED.format(error=result.error)
            )
        return result.summary

    @staticmethod
    def _transcript_error_message(error: TranscriptFetchError) -> str:
        if error.kind == TranscriptErrorKind.BLOCKED:
            return ErrorMessages.TRANSCRIPT_BLOCKED
        if error.kind == TranscriptErrorKind.NO_TRANSCRIPT:
            return ErrorMessages.TRANSCRIPT_MISSING
        return ErrorMessages.PROCESSING_FAILED.format(error=error.message)

    async def save_summary(self, payload: SaveSummaryRequest) -> None:
        """
        Persist a summary after checking that every field is present.

        Raises:
            BadRequestError: A required field is missing or empty.
            InternalServerError: The insert failed.
        """
        missing = payload.missing_fields()
        if missing:
            logger.warning(f"Refusing to save summary, missing fields: {missing}")
            raise BadRequestError(ErrorMessages.MISSING_SAVE_DATA)

        try:
            await self.summary_repository.create_summary(
                youtube_url=payload.url,
                title=payload.title,
                channel_title=payload.channel_title,
                thumbnail_url=payload.thumbnail_url,
                summary=payload.summary,
            )
        except DATABASE_ERRORS as e:
            logger.exception("Error saving summary")
            raise InternalServerError(ErrorMessages.SAVE_FAILED) from e

        logger.info(f"Saved summary for {payload.url}")

    async def list_summaries(self) -> List[SummaryModel]:
        try:
            return await self.summary_repository.list_summaries()
        except DATABASE_ERRORS as e:
            logger.exception("Error fetching summaries")
            raise InternalServerError(ErrorMessages.FETCH_FAILED) from e

    async def delete_summary(self, summary_id: str) -> None:
        """
        Delete a saved summary by id. A well-formed id that matches nothing
        is not an error.

        Raises:
            InternalServerError: The id is not an integer, or the delete failed.
        """
        try:
            parsed_id = int(summary_id)
        except (TypeError, ValueError) as e:
            logger.error(f"Error deleting summary: invalid id {summary_id!r}")
            raise InternalServerError(ErrorMessages.DELETE_FAILED) from e

        try:
            await self.summary_repository.delete_summary(parsed_id)
        except DATABASE_ERRORS as e:
            logger.exception(f"Error deleting summary {summary_id}")
            raise InternalServerError(ErrorMessages.DELETE_FAILED) from e

        logger.info(f"Deleted summary {summary_id}")
