"""
Shared pytest fixtures and configuration.
"""
import os

# Settings are read at import time; keep tests off any real database or API.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("OPENROUTER_API_KEY", "test-openrouter-key")
os.environ.setdefault("YOUTUBE_API_KEY", "test-youtube-key")

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.api.dependencies import get_summary_service
from app.core.db import Base
from app.core.providers.llm_provider import LLMProvider
from app.models import sql  # noqa: F401
from app.repositories.summary import SummaryRepository
from app.services.summarization import SummarizationService
from app.services.youtube import YouTubeService


@pytest.fixture
def mock_summary_service():
    """Create a mock SummaryService."""
    return AsyncMock()


@pytest.fixture
def override_dependencies(mock_summary_service):
    """Override FastAPI dependencies for testing."""
    def override_get_summary_service():
        return mock_summary_service

    app.dependency_overrides[get_summary_service] = override_get_summary_service

    yield

    app.dependency_overrides.clear()


@pytest.fixture
def mock_youtube_service():
    """A YouTubeService whose network calls are AsyncMocks."""
    service = MagicMock(spec=YouTubeService)
    service.get_video_metadata = AsyncMock()
    service.fetch_transcript = AsyncMock()
    return service


@pytest.fixture
def mock_llm_provider():
    provider = AsyncMock(spec=LLMProvider)
    provider.model_name = "test-model"
    provider.generate_text.return_value = MagicMock(content="Mocked Summary Content")
    return provider


@pytest.fixture
def summarization_service(mock_llm_provider):
    return SummarizationService(llm_provider=mock_llm_provider)


@pytest_asyncio.fixture
async def db_session():
    """An AsyncSession bound to a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def summary_repository(db_session):
    return SummaryRepository(db_session)
