"""
Application-wide constants and user-facing messages.
"""


class YouTubeConfig:
    """Configuration for YouTube service."""
    VIDEO_ID_PATTERN = (
        r"(?:https?://)?(?:www\.)?"
        r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)"
        r"([a-zA-Z0-9_-]{11})"
    )
    # Highest resolution first
    THUMBNAIL_PRIORITY = ("maxres", "standard", "high", "medium", "default")
    BLOCKED_MARKERS = ("blocked", "cloud provider")
    NO_TRANSCRIPT_MARKER = "transcript"


class ErrorMessages:
    """Messages returned in ``{"error": ...}`` bodies."""
    INVALID_URL = "Invalid YouTube URL."
    VIDEO_ID_NOT_FOUND = "Could not extract video ID."
    VIDEO_NOT_FOUND = "Video not found."
    METADATA_API_FAILED = "An internal API error occurred."
    TRANSCRIPT_BLOCKED = (
        "YouTube has blocked this request. Please ensure your proxy is configured correctly."
    )
    TRANSCRIPT_MISSING = (
        "Could not retrieve video transcript. The video may not have one, or it might be private."
    )
    PROCESSING_FAILED = "An error occurred while processing the video: {error}"
    SUMMARIZATION_FAILED = "An error occurred during summarization: {error}"
    MISSING_SAVE_DATA = "Missing data for saving."
    SAVE_FAILED = "Failed to save summary."
    FETCH_FAILED = "Failed to fetch summaries."
    DELETE_FAILED = "Failed to delete summary."


class SuccessMessages:
    SAVED = "Summary saved successfully."
    DELETED = "Summary deleted successfully."
