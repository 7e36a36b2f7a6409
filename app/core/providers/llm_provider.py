"""
Abstract base class for LLM providers.

This module defines a vendor-neutral interface for interacting with
hosted Large Language Models. Concrete implementations (OpenRouter, Groq)
must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.enums import LLMRole


class LLMMessage(BaseModel):
    """Vendor-neutral message format for LLM conversations."""

    role: LLMRole
    content: str

    model_config = ConfigDict(frozen=True)


class LLMResponse(BaseModel):
    """Standardized response from an LLM provider."""

    content: str
    model: str
    usage: Optional[dict[str, int]] = None

    model_config = ConfigDict(frozen=True)


class LLMProvider(ABC):
    """
    Abstract interface for LLM providers.

    Example:
        provider = OpenRouterProvider(api_key="...", model_name="xiaomi/mimo-v2-flash:free")
        response = await provider.generate_text([
            LLMMessage(role=LLMRole.USER, content="Summarize this."),
        ])
        print(response.content)
    """

    model_name: str

    @abstractmethod
    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate text completion from messages.

        Args:
            messages: List of conversation messages.
            temperature: Sampling temperature (None for model default).
            max_tokens: Maximum tokens to generate (None for model default).

        Returns:
            LLMResponse containing generated content and metadata.
        """
        ...


def to_chat_messages(messages: list[LLMMessage]) -> list[dict[str, str]]:
    """Convert to the OpenAI chat format shared by OpenRouter and Groq."""
    return [{"role": msg.role.value, "content": msg.content} for msg in messages]


def extract_usage(usage) -> Optional[dict[str, int]]:
    if usage is None:
        return None
    return {
        "prompt_tokens": usage.prompt_tokens,
        "completion_tokens": usage.completion_tokens,
        "total_tokens": usage.total_tokens,
    }
