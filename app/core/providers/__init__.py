"""
Provider abstraction layer for model-agnostic LLM integration.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
)
from app.core.providers.openrouter_provider import OpenRouterProvider
from app.core.providers.groq_provider import GroqProvider

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMResponse",
    "OpenRouterProvider",
    "GroqProvider",
]
