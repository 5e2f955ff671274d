"""Database connection and session management"""
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from play_history_report.db_config import DatabaseManager

logger = logging.getLogger(__name__)

class Database:
    """Database connection and session manager for the history store"""

    def __init__(self):
        """Initialize database manager state"""
        self._engine = None
        self._SessionLocal = None

    def init(self, database_path: str) -> None:
        """
        Initialize a read-only connection to the history database.

        Raises:
            FileNotFoundError: If the database file does not exist
            SQLAlchemyError: If the engine cannot be created
        """
        try:
            creator = DatabaseManager.connection_factory(database_path)
            self._engine = create_engine("sqlite://", creator=creator)
            self._SessionLocal = sessionmaker(bind=self._engine)
            logger.info(f"Database initialized from {database_path}")

        except SQLAlchemyError as e:
            logger.error(f"Database initialization failed: {e}")
            raise

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional scope around a series of operations"""
        if not self._SessionLocal:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_session(self) -> Session:
        """Get a new database session"""
        if not self._SessionLocal:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._SessionLocal()

    def dispose(self) -> None:
        """
        Clean up database connections.
        Should be called during application shutdown.
        """
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._SessionLocal = None

# Global database instance
db = Database()
