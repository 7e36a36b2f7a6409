"""
Groq (Llama) implementation of LLMProvider.
"""
from typing import Optional

from groq import AsyncGroq
from loguru import logger

from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
    extract_usage,
    to_chat_messages,
)


class GroqProvider(LLMProvider):
    """
    Groq implementation of LLMProvider, for fast Llama model inference.

    Example:
        provider = GroqProvider(
            api_key="your-api-key",
            model_name="llama-3.3-70b-versatile",
        )
        response = await provider.generate_text(messages)
    """

    def __init__(self, api_key: str, model_name: str = "llama-3.3-70b-versatile"):
        self.client = AsyncGroq(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate text completion using Groq."""
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        logger.debug(f"Sending request to Groq ({self.model_name})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=to_chat_messages(messages),
            **kwargs,
        )

        usage = extract_usage(response.usage)
        if usage:
            logger.debug(f"Groq token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
