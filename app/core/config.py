"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enums import LLMProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Video Summarizer"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str
    DATABASE_SSL: bool = False

    # LLM
    LLM_PROVIDER: LLMProviderType = LLMProviderType.OPENROUTER

    OPENROUTER_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "OPENROUTER_KEY"),
    )
    OPENROUTER_MODEL_NAME: str = "xiaomi/mimo-v2-flash:free"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"

    GROQ_API_KEY: str = ""
    GROQ_MODEL_NAME: str = "llama-3.3-70b-versatile"

    # YouTube Data API
    YOUTUBE_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("YOUTUBE_API_KEY", "GOOGLE_CLOUD_API_KEY"),
    )

    # Transcript proxy
    PROXY_USERNAME: Optional[str] = None
    PROXY_PASSWORD: Optional[str] = None
    PROXY_HOST: Optional[str] = None
    PROXY_PORT: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_ssl_enabled(self) -> bool:
        """TLS is forced on in production, otherwise follows DATABASE_SSL."""
        return self.DATABASE_SSL or self.ENVIRONMENT.lower() == "production"


settings = Settings()
