from sqlalchemy import Column, DateTime, Integer, Text, func
from app.core.db import Base


class SummaryModel(Base):
    """
    SQLAlchemy ORM model representing a saved video summary.

    Attributes:
        id (int): Auto-increment primary key.
        youtube_url (str): The URL the summary was requested for.
        title (str): Video title at save time.
        channel_title (str): Channel name at save time.
        thumbnail_url (str): Thumbnail URL at save time.
        summary (str): The generated summary text.
        timestamp (datetime): Creation time, assigned by the database.
    """
    __tablename__ = "summaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    youtube_url = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    channel_title = Column(Text, nullable=False)
    thumbnail_url = Column(Text, nullable=False)
    summary = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Load the database-assigned timestamp right after INSERT
    __mapper_args__ = {"eager_defaults": True}
