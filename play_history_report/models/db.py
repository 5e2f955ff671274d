"""SQLAlchemy model of the media player's play history table"""
from sqlalchemy import Column, Integer, String, BigInteger
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Columns older player versions do not record; their absence is tolerated
OPTIONAL_COLUMNS = ('duration_ms', 'genre')

class PlayHistory(Base):
    """
    One row per historical play event.
    played_at is stored as ISO text (YYYY-MM-DD...), so year filtering uses LIKE.
    """
    __tablename__ = 'play_history'

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=True)
    artist = Column(String, nullable=True)
    album = Column(String, nullable=True)
    played_at = Column(String, nullable=True, index=True)
    duration_ms = Column(BigInteger, nullable=True)
    genre = Column(String, nullable=True)
