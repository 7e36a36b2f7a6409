from .youtube import TranscriptSegment, VideoMetadata, Video, SummarizationResult
from .api import (
    VideoUrlRequest,
    VideoInfoResponse,
    SummarizeResponse,
    SaveSummaryRequest,
    SummaryRecordResponse,
    MessageResponse,
    DeleteResponse,
)
from .enums import LLMRole, LLMProviderType, TranscriptErrorKind
