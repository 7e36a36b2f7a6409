import ssl

import asyncpg
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from app.core.config import settings


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver."""
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://") and "asyncpg" not in url:
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_connect_args(url: str, use_ssl: bool) -> dict:
    """
    TLS for hosted Postgres. Certificates are not verified, which matches
    what managed providers with self-signed chains require.
    """
    if not use_ssl or "asyncpg" not in url:
        return {}
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return {"ssl": context}


# Connect-time driver errors are not always wrapped by SQLAlchemy
DATABASE_ERRORS = (SQLAlchemyError, OSError, asyncpg.PostgresError, asyncpg.InterfaceError)

db_url = normalize_database_url(settings.DATABASE_URL)

engine = create_async_engine(
    db_url,
    echo=False,
    pool_pre_ping=True,
    connect_args=build_connect_args(db_url, settings.database_ssl_enabled),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

Base = declarative_base()


async def init_db() -> None:
    """Create the summaries table if it does not exist yet."""
    # Registers the models on Base.metadata
    from app.models import sql  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database initialized successfully.")
    except DATABASE_ERRORS as e:
        logger.error(f"Error initializing database: {e}")


async def get_db_session():
    async with AsyncSessionLocal() as session:
        yield session
