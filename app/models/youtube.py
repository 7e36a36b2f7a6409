from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# --- Core Data Models ---

class TranscriptSegment(BaseModel):
    text: str
    start: float
    duration: float

    model_config = ConfigDict(frozen=True)

class VideoMetadata(BaseModel):
    title: str
    channel_title: str
    thumbnail_url: str

    model_config = ConfigDict(frozen=True)

class Video(BaseModel):
    id: str
    transcript: List[TranscriptSegment] = Field(default_factory=list)

    @property
    def full_text(self) -> str:
        """Concatenates all transcript segments, in order, separated by spaces."""
        return " ".join(seg.text for seg in self.transcript)

class SummarizationResult(BaseModel):
    """Outcome of one summarization call: either a summary or an error."""
    success: bool
    summary: Optional[str] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls, summary: str) -> "SummarizationResult":
        return cls(success=True, summary=summary)

    @classmethod
    def failed(cls, error: str) -> "SummarizationResult":
        return cls(success=False, error=error)
