"""
Integration tests for the summarizer API endpoints.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from asyncpg.exceptions import InvalidPasswordError
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.dependencies import get_summary_service
from app.core.constants import ErrorMessages
from app.core.exceptions import (
    InternalServerError,
    TranscriptFetchError,
    UpstreamServiceError,
)
from app.main import app
from app.models import SummarizationResult, TranscriptSegment, VideoMetadata
from app.models.enums import TranscriptErrorKind
from app.models.sql import SummaryModel
from app.repositories.summary import SummaryRepository
from app.services.summarization import SummarizationService
from app.services.summaries import SummaryService


client = TestClient(app)

VIDEO_URL = "https://www.youtube.com/watch?v=abc12345678"

SAVE_PAYLOAD = {
    "url": VIDEO_URL,
    "title": "T",
    "channel_title": "C",
    "thumbnail_url": "U",
    "summary": "S",
}


@pytest.fixture
def mock_summarization_service():
    service = MagicMock(spec=SummarizationService)
    service.summarize = AsyncMock(return_value=SummarizationResult.ok("Generated summary"))
    return service


@pytest.fixture
def mock_summary_repository():
    return AsyncMock(spec=SummaryRepository)


@pytest.fixture
def wired_service(mock_youtube_service, mock_summarization_service, mock_summary_repository):
    """A real SummaryService over mocked components, injected into the app."""
    service = SummaryService(
        youtube_service=mock_youtube_service,
        summarization_service=mock_summarization_service,
        summary_repository=mock_summary_repository,
    )
    app.dependency_overrides[get_summary_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


# --- Video info ---

def test_get_video_info_end_to_end(wired_service, mock_youtube_service):
    """Test POST /get_video_info returns exactly the stubbed metadata."""
    mock_youtube_service.get_video_metadata.return_value = VideoMetadata(
        title="T", channel_title="C", thumbnail_url="U"
    )

    response = client.post("/get_video_info", json={"url": VIDEO_URL})

    assert response.status_code == 200
    assert response.json() == {"title": "T", "channel_title": "C", "thumbnail_url": "U"}
    mock_youtube_service.get_video_metadata.assert_called_once_with("abc12345678")


def test_get_video_info_invalid_url(wired_service, mock_youtube_service):
    response = client.post("/get_video_info", json={"url": "https://example.com/video"})

    assert response.status_code == 400
    assert response.json() == {"error": ErrorMessages.INVALID_URL}
    mock_youtube_service.get_video_metadata.assert_not_called()


def test_get_video_info_missing_url(wired_service):
    response = client.post("/get_video_info", json={})

    assert response.status_code == 400
    assert response.json() == {"error": ErrorMessages.INVALID_URL}


def test_get_video_info_not_found(wired_service, mock_youtube_service):
    mock_youtube_service.get_video_metadata.return_value = None

    response = client.post("/get_video_info", json={"url": VIDEO_URL})

    assert response.status_code == 404
    assert response.json() == {"error": ErrorMessages.VIDEO_NOT_FOUND}


def test_get_video_info_upstream_error(wired_service, mock_youtube_service):
    mock_youtube_service.get_video_metadata.side_effect = UpstreamServiceError(
        "YouTube Data API", "quota exceeded"
    )

    response = client.post("/get_video_info", json={"url": VIDEO_URL})

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.METADATA_API_FAILED}


# --- Summarize ---

def test_summarize_joins_transcript(
    wired_service, mock_youtube_service, mock_summarization_service
):
    mock_youtube_service.fetch_transcript.return_value = [
        TranscriptSegment(text="Hello", start=0.0, duration=1.0),
        TranscriptSegment(text="there", start=1.0, duration=1.0),
        TranscriptSegment(text="world", start=2.0, duration=1.0),
    ]

    response = client.post("/summarize", json={"url": "https://youtu.be/abc12345678"})

    assert response.status_code == 200
    assert response.json() == {"summary": "Generated summary"}
    mock_youtube_service.fetch_transcript.assert_called_once_with("abc12345678")
    mock_summarization_service.summarize.assert_called_once_with("Hello there world")


def test_summarize_invalid_url(wired_service, mock_youtube_service):
    response = client.post("/summarize", json={"url": "not a url"})

    assert response.status_code == 400
    assert response.json() == {"error": ErrorMessages.VIDEO_ID_NOT_FOUND}
    mock_youtube_service.fetch_transcript.assert_not_called()


@pytest.mark.parametrize(
    "kind, message, expected",
    [
        (TranscriptErrorKind.NO_TRANSCRIPT, "Transcripts are disabled", ErrorMessages.TRANSCRIPT_MISSING),
        (TranscriptErrorKind.BLOCKED, "Request blocked", ErrorMessages.TRANSCRIPT_BLOCKED),
        (
            TranscriptErrorKind.UNKNOWN,
            "connection reset",
            "An error occurred while processing the video: connection reset",
        ),
    ],
)
def test_summarize_transcript_errors(
    wired_service, mock_youtube_service, mock_summarization_service, kind, message, expected
):
    mock_youtube_service.fetch_transcript.side_effect = TranscriptFetchError(kind, message)

    response = client.post("/summarize", json={"url": VIDEO_URL})

    assert response.status_code == 500
    assert response.json() == {"error": expected}
    mock_summarization_service.summarize.assert_not_called()


def test_summarize_llm_failure_is_reported(
    wired_service, mock_youtube_service, mock_summarization_service
):
    mock_youtube_service.fetch_transcript.return_value = [
        TranscriptSegment(text="Hello", start=0.0, duration=1.0),
    ]
    mock_summarization_service.summarize.return_value = SummarizationResult.failed("rate limited")

    response = client.post("/summarize", json={"url": VIDEO_URL})

    assert response.status_code == 500
    assert response.json() == {"error": "An error occurred during summarization: rate limited"}


# --- Save ---

def test_save_summary(wired_service, mock_summary_repository):
    response = client.post("/save_summary", json=SAVE_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"message": "Summary saved successfully."}
    mock_summary_repository.create_summary.assert_called_once_with(
        youtube_url=VIDEO_URL,
        title="T",
        channel_title="C",
        thumbnail_url="U",
        summary="S",
    )


@pytest.mark.parametrize("missing", list(SAVE_PAYLOAD))
def test_save_summary_missing_field(wired_service, mock_summary_repository, missing):
    payload = {k: v for k, v in SAVE_PAYLOAD.items() if k != missing}

    response = client.post("/save_summary", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": ErrorMessages.MISSING_SAVE_DATA}
    mock_summary_repository.create_summary.assert_not_called()


def test_save_summary_empty_field(wired_service, mock_summary_repository):
    response = client.post("/save_summary", json={**SAVE_PAYLOAD, "summary": ""})

    assert response.status_code == 400
    mock_summary_repository.create_summary.assert_not_called()


def test_save_summary_storage_failure(wired_service, mock_summary_repository):
    mock_summary_repository.create_summary.side_effect = OperationalError(
        "INSERT", {}, Exception("connection refused")
    )

    response = client.post("/save_summary", json=SAVE_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.SAVE_FAILED}


# --- List / delete ---

def test_get_summaries(override_dependencies, mock_summary_service):
    """Test GET /get_summaries serializes records."""
    record = SummaryModel(
        id=7,
        youtube_url=VIDEO_URL,
        title="T",
        channel_title="C",
        thumbnail_url="U",
        summary="S",
        timestamp=datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
    )
    mock_summary_service.list_summaries.return_value = [record]

    response = client.get("/get_summaries")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == 7
    assert data[0]["youtube_url"] == VIDEO_URL
    assert data[0]["summary"] == "S"
    assert data[0]["timestamp"].startswith("2026-10-19T12:00:00")


def test_get_summaries_empty(override_dependencies, mock_summary_service):
    mock_summary_service.list_summaries.return_value = []

    response = client.get("/get_summaries")

    assert response.status_code == 200
    assert response.json() == []


def test_get_summaries_storage_failure(wired_service, mock_summary_repository):
    mock_summary_repository.list_summaries.side_effect = OperationalError(
        "SELECT", {}, Exception("connection refused")
    )

    response = client.get("/get_summaries")

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.FETCH_FAILED}


def test_delete_summary(wired_service, mock_summary_repository):
    """Deleting an id that does not exist still succeeds."""
    response = client.delete("/delete_summary/9999")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Summary deleted successfully."}
    mock_summary_repository.delete_summary.assert_called_once_with(9999)


def test_delete_summary_non_integer_id(wired_service, mock_summary_repository):
    """A malformed id is a failed delete, not a validation error."""
    response = client.delete("/delete_summary/abc")

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.DELETE_FAILED}
    mock_summary_repository.delete_summary.assert_not_called()


def test_get_summaries_driver_error(wired_service, mock_summary_repository):
    """Connect-time asyncpg errors are reported as storage failures."""
    mock_summary_repository.list_summaries.side_effect = InvalidPasswordError(
        "password authentication failed for user \"app\""
    )

    response = client.get("/get_summaries")

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.FETCH_FAILED}


def test_delete_summary_storage_failure(override_dependencies, mock_summary_service):
    mock_summary_service.delete_summary.side_effect = InternalServerError(
        ErrorMessages.DELETE_FAILED
    )

    response = client.delete("/delete_summary/1")

    assert response.status_code == 500
    assert response.json() == {"error": ErrorMessages.DELETE_FAILED}


# --- Misc ---

def test_malformed_body_is_bad_request(wired_service):
    response = client.post(
        "/summarize",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_request_id_header(override_dependencies, mock_summary_service):
    mock_summary_service.list_summaries.return_value = []

    response = client.get("/get_summaries")

    assert "X-Request-ID" in response.headers


def test_health_check():
    """Test GET /health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "project" in data


def test_index_page():
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
