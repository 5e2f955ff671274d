"""Database location handling for the local play history store"""
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

# The report only reads the media player's history, never writes to it
SQLITE_OPEN_MODE = 'ro'

@dataclass
class SqliteLocation:
    """Location of a SQLite database file with validation"""
    path: Path
    mode: str = SQLITE_OPEN_MODE

    def to_connection_uri(self) -> str:
        """Generate a SQLite URI with proper escaping of the file path"""
        return f"{self.path.resolve().as_uri()}?mode={self.mode}"

    @classmethod
    def from_path(cls, database_path: str) -> 'SqliteLocation':
        """Create a location from a configured path, checking that the file exists"""
        path = Path(database_path)
        if not path.is_file():
            raise FileNotFoundError(f"Database file not found: {database_path}")
        return cls(path=path)

class DatabaseManager:
    """Builds connection factories for the history database"""

    @staticmethod
    def get_connection_uri(database_path: str) -> str:
        """
        Generate the read-only connection URI for a database file

        Args:
            database_path: Path to the SQLite history database

        Returns:
            SQLite URI suitable for sqlite3.connect(..., uri=True)
        """
        return SqliteLocation.from_path(database_path).to_connection_uri()

    @classmethod
    def connection_factory(cls, database_path: str) -> Callable[[], sqlite3.Connection]:
        """
        Build a connection creator for SQLAlchemy's create_engine

        Raises:
            FileNotFoundError: If the database file does not exist
        """
        uri = cls.get_connection_uri(database_path)
        return lambda: sqlite3.connect(uri, uri=True)
