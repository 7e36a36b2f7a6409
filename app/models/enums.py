"""
Enums for type-safe values across the application.
"""
from enum import Enum


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Groq compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    OPENROUTER = "openrouter"
    GROQ = "groq"


class TranscriptErrorKind(str, Enum):
    """Why a transcript could not be fetched."""
    BLOCKED = "blocked"
    NO_TRANSCRIPT = "no_transcript"
    UNKNOWN = "unknown"
