"""Domain models for play history and the statistics derived from it"""
from dataclasses import dataclass, field
from typing import List

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"

@dataclass(frozen=True)
class PlayRecord:
    """One logged play of a track, already normalized at the source boundary"""
    title: str = UNKNOWN_TITLE
    artist: str = UNKNOWN_ARTIST
    album: str = UNKNOWN_ALBUM
    played_at: str = ""
    duration_ms: int = 0
    genre: str = ""

@dataclass(frozen=True)
class RankedItem:
    """Largest group for a single-answer metric"""
    name: str
    count: int
    sub_name: str = ""

    @classmethod
    def not_available(cls) -> 'RankedItem':
        """Sentinel used when no record qualifies for the metric"""
        return cls(name="N/A", count=0, sub_name="")

@dataclass(frozen=True)
class ChartItem:
    """One entry of a ranked chart list"""
    label: str
    value: int

@dataclass(frozen=True)
class Stats:
    """Aggregated listening statistics for one report"""
    top_song: RankedItem
    top_artist: RankedItem
    top_album: RankedItem
    top_genre: RankedItem
    total_ms: int
    total_hours: float
    total_days: float
    top_artists: List[ChartItem] = field(default_factory=list)
    genre_distribution: List[ChartItem] = field(default_factory=list)
    top_albums: List[ChartItem] = field(default_factory=list)
    monthly_pattern: List[ChartItem] = field(default_factory=list)

    @property
    def has_duration(self) -> bool:
        return self.total_ms > 0

    @property
    def has_genre(self) -> bool:
        return len(self.genre_distribution) > 0
