import sqlite3
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from play_history_report.config import Settings
from play_history_report.db import Database
from play_history_report.models.db import Base, PlayHistory
from play_history_report.models.play import PlayRecord

from factories import record

LEGACY_SCHEMA = """
    CREATE TABLE play_history (
        id INTEGER PRIMARY KEY,
        title TEXT,
        artist TEXT,
        album TEXT,
        played_at TEXT
    )
"""

@pytest.fixture
def scenario_records() -> List[PlayRecord]:
    """Three plays of Song A and one of Song B, most recent first"""
    song_b = record("Song B", "Artist Y", "Album 2", "2025-02-10", 100000, "Pop")
    song_a = record("Song A", "Artist X", "Album 1", "2025-01-05", 200000, "Rock")
    return [song_b, song_a, song_a, song_a]

@pytest.fixture
def make_store(tmp_path: Path) -> Callable[..., Path]:
    """Create a play history database; legacy=True omits duration and genre columns"""
    def _make(rows: List[Dict], legacy: bool = False, name: str = "history.db") -> Path:
        path = tmp_path / name
        if legacy:
            conn = sqlite3.connect(path)
            conn.execute(LEGACY_SCHEMA)
            conn.executemany(
                "INSERT INTO play_history (title, artist, album, played_at) VALUES (?, ?, ?, ?)",
                [(r.get('title'), r.get('artist'), r.get('album'), r.get('played_at')) for r in rows],
            )
            conn.commit()
            conn.close()
            return path

        engine = create_engine(f"sqlite:///{path}")
        Base.metadata.create_all(engine)
        with Session(engine) as session:
            session.add_all([PlayHistory(**row) for row in rows])
            session.commit()
        engine.dispose()
        return path
    return _make

@pytest.fixture
def scenario_rows() -> List[Dict]:
    rows = [
        {'title': "Song A", 'artist': "Artist X", 'album': "Album 1",
         'played_at': f"2025-01-0{day} 12:00:00", 'duration_ms': 200000, 'genre': "Rock"}
        for day in (3, 4, 5)
    ]
    rows.append({'title': "Song B", 'artist': "Artist Y", 'album': "Album 2",
                 'played_at': "2025-02-10 08:30:00", 'duration_ms': 100000, 'genre': "Pop"})
    rows.append({'title': "Old Song", 'artist': "Artist Z", 'album': "Album 0",
                 'played_at': "2024-12-31 23:59:59", 'duration_ms': 100000, 'genre': "Jazz"})
    return rows

@pytest.fixture
def database():
    database = Database()
    yield database
    database.dispose()

@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    def _make(database_path: Optional[Path], **overrides) -> Settings:
        values = {
            'DATABASE_PATH': str(database_path) if database_path else None,
            'OUTPUT_DIR': str(tmp_path / "out"),
        }
        values.update(overrides)
        return Settings(**values)
    return _make
