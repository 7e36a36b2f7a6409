from typing import List
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.sql import SummaryModel


class SummaryRepository:
    """
    Repository layer for saved summaries.
    Each write commits on its own; nothing spans more than one call.
    """
    def __init__(self, db: AsyncSession):
        """
        Initialize the SummaryRepository.

        Args:
            db (AsyncSession): The SQLAlchemy async session for database operations.
        """
        self.db = db

    async def list_summaries(self) -> List[SummaryModel]:
        """
        Returns every saved summary, newest first.
        """
        query = select(SummaryModel).order_by(
            SummaryModel.timestamp.desc(), SummaryModel.id.desc()
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create_summary(
        self,
        youtube_url: str,
        title: str,
        channel_title: str,
        thumbnail_url: str,
        summary: str,
    ) -> None:
        """
        Persists a new summary. id and timestamp are assigned by the database.
        """
        self.db.add(
            SummaryModel(
                youtube_url=youtube_url,
                title=title,
                channel_title=channel_title,
                thumbnail_url=thumbnail_url,
                summary=summary,
            )
        )
        await self.db.commit()

    async def delete_summary(self, summary_id: int) -> None:
        """
        Deletes the summary with the given id. A missing id is not an error.
        """
        await self.db.execute(delete(SummaryModel).where(SummaryModel.id == summary_id))
        await self.db.commit()
