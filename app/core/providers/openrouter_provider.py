"""
OpenRouter implementation of LLMProvider.

OpenRouter exposes an OpenAI-compatible API, so the official ``openai``
SDK is used with a custom base URL.
"""
from typing import Optional

from loguru import logger
from openai import AsyncOpenAI

from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
    extract_usage,
    to_chat_messages,
)


class OpenRouterProvider(LLMProvider):
    """
    OpenRouter implementation of LLMProvider.

    Example:
        provider = OpenRouterProvider(
            api_key="your-api-key",
            model_name="xiaomi/mimo-v2-flash:free",
        )
        response = await provider.generate_text(messages)
    """

    def __init__(
        self,
        api_key: str,
        model_name: str,
        base_url: str = "https://openrouter.ai/api/v1",
    ):
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate text completion using OpenRouter."""
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        logger.debug(f"Sending request to OpenRouter ({self.model_name})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=to_chat_messages(messages),
            **kwargs,
        )

        usage = extract_usage(response.usage)
        if usage:
            logger.debug(f"OpenRouter token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
