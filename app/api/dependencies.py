"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. The LLM provider is selected by config.
"""
from functools import lru_cache
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db_session
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.openrouter_provider import OpenRouterProvider
from app.core.providers.groq_provider import GroqProvider
from app.models.enums import LLMProviderType
from app.repositories.summary import SummaryRepository
from app.services.proxy import ProxyService
from app.services.youtube import YouTubeService
from app.services.summarization import SummarizationService
from app.services.summaries import SummaryService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_summary_llm_provider() -> LLMProvider:
    """
    Get LLM provider for summarization.

    Default: OpenRouter (configured in settings.LLM_PROVIDER)
    """
    provider_type = settings.LLM_PROVIDER

    if provider_type == LLMProviderType.OPENROUTER:
        return OpenRouterProvider(
            api_key=settings.OPENROUTER_API_KEY,
            model_name=settings.OPENROUTER_MODEL_NAME,
            base_url=settings.OPENROUTER_BASE_URL,
        )
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_proxy_service() -> ProxyService:
    """Get proxy service for transcript requests."""
    return ProxyService(
        username=settings.PROXY_USERNAME,
        password=settings.PROXY_PASSWORD,
        host=settings.PROXY_HOST,
        port=settings.PROXY_PORT,
    )


@lru_cache
def get_youtube_service() -> YouTubeService:
    """Get YouTube service for metadata and transcripts."""
    return YouTubeService(
        api_key=settings.YOUTUBE_API_KEY,
        proxy_service=get_proxy_service(),
    )


def get_summary_repository(
    db: AsyncSession = Depends(get_db_session),
) -> SummaryRepository:
    """Get repository for saved summaries."""
    return SummaryRepository(db)


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_summary_llm_provider),
) -> SummarizationService:
    """Get summarization service."""
    return SummarizationService(llm_provider=llm_provider)


def get_summary_service(
    youtube_service: YouTubeService = Depends(get_youtube_service),
    summarization_service: SummarizationService = Depends(get_summarization_service),
    summary_repository: SummaryRepository = Depends(get_summary_repository),
) -> SummaryService:
    """
    Get the summary service.

    Wires together:
    - YouTubeService for metadata and transcripts
    - SummarizationService for the LLM call
    - SummaryRepository for persistence
    """
    return SummaryService(
        youtube_service=youtube_service,
        summarization_service=summarization_service,
        summary_repository=summary_repository,
    )
