from play_history_report.models.play import PlayRecord

def record(title: str, artist: str, album: str = "Album", played_at: str = "2025-01-01 10:00:00",
           duration_ms: int = 0, genre: str = "") -> PlayRecord:
    return PlayRecord(title=title, artist=artist, album=album, played_at=played_at,
                      duration_ms=duration_ms, genre=genre)
