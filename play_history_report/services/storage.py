"""Read access to the media player's play history"""
import logging
from typing import Any, List, Set

from sqlalchemy import inspect
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from play_history_report.models.db import PlayHistory, OPTIONAL_COLUMNS
from play_history_report.models.play import (
    PlayRecord,
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    UNKNOWN_TITLE,
)

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('title', 'artist', 'album', 'played_at')

def _text_or(value: Any, default: str) -> str:
    """Map a database NULL to the documented default"""
    if value is None:
        return default
    return str(value)

def _normalize_duration(value: Any) -> int:
    """Durations are non-negative milliseconds; anything unusable counts as 0"""
    if value is None:
        return 0
    try:
        return max(0, int(value))
    except (ValueError, TypeError):
        logger.warning(f"Invalid duration {value!r} in play history, treating as 0")
        return 0

class StorageService:
    """Handles all database reads"""

    def __init__(self, session: Session):
        self.session = session

    def available_columns(self) -> Set[str]:
        """Column names present in the play_history table of this store"""
        inspector = inspect(self.session.get_bind())
        return {column['name'] for column in inspector.get_columns(PlayHistory.__tablename__)}

    def fetch_year(self, year: int) -> List[PlayRecord]:
        """
        Fetch every play recorded in the given year, most recent first.

        Stores that predate the duration/genre columns are read in degraded
        mode: the missing fields keep their PlayRecord defaults.
        """
        try:
            present = self.available_columns()
            missing_optional = [name for name in OPTIONAL_COLUMNS if name not in present]
            if missing_optional:
                logger.info(f"Play history has no {', '.join(missing_optional)} column(s); related stats are disabled")

            selected = list(REQUIRED_COLUMNS) + [name for name in OPTIONAL_COLUMNS if name in present]
            rows = (
                self.session.query(*[getattr(PlayHistory, name) for name in selected])
                .filter(PlayHistory.played_at.like(f"{year}%"))
                .order_by(PlayHistory.played_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching play history for {year}: {e}")
            self.session.rollback()
            raise

        records = [self._to_record(row._mapping) for row in rows]
        logger.info(f"Fetched {len(records)} plays for {year}")
        return records

    @staticmethod
    def _to_record(row: Any) -> PlayRecord:
        """Convert a result row into a PlayRecord, applying the NULL defaults"""
        return PlayRecord(
            title=_text_or(row.get('title'), UNKNOWN_TITLE),
            artist=_text_or(row.get('artist'), UNKNOWN_ARTIST),
            album=_text_or(row.get('album'), UNKNOWN_ALBUM),
            played_at=_text_or(row.get('played_at'), ""),
            duration_ms=_normalize_duration(row.get('duration_ms')),
            genre=_text_or(row.get('genre'), ""),
        )
