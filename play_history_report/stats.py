"""Listening statistics aggregation over a year of play records"""
from dataclasses import dataclass
from typing import Callable, Hashable, List, Sequence, Tuple

from play_history_report.models.play import ChartItem, PlayRecord, RankedItem, Stats

TOP_N = 10
MS_PER_HOUR = 3_600_000
HOURS_PER_DAY = 24
MONTH_KEY_LENGTH = 7  # "YYYY-MM"

@dataclass
class ListeningTotals:
    """Summed listening time"""
    total_ms: int
    total_hours: float
    total_days: float

def rank_groups(
    records: Sequence[PlayRecord],
    key: Callable[[PlayRecord], Hashable],
) -> List[Tuple[Hashable, int]]:
    """
    Group records by key and order the groups by count, largest first.

    Groups with equal counts keep the order in which they were first
    encountered in records (dicts preserve insertion order and sorted()
    is stable).
    """
    counts = {}
    for record in records:
        group = key(record)
        counts[group] = counts.get(group, 0) + 1
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)

def _first_ranked(ranked: List[Tuple[Hashable, int]], to_item: Callable[[Hashable, int], RankedItem]) -> RankedItem:
    if not ranked:
        return RankedItem.not_available()
    group, count = ranked[0]
    return to_item(group, count)

def _with_genre(records: Sequence[PlayRecord]) -> List[PlayRecord]:
    return [record for record in records if record.genre]

def _song_key(record: PlayRecord) -> Tuple[str, str]:
    return record.title, record.artist

def _album_key(record: PlayRecord) -> Tuple[str, str]:
    return record.album, record.artist

class StatsAggregator:
    """Calculates the year-in-review statistics for a collection of plays"""

    def aggregate(self, records: Sequence[PlayRecord]) -> Stats:
        """
        Calculate all statistics for a non-empty collection of plays.

        Raises:
            ValueError: If records is empty; callers report "no songs" instead
        """
        if not records:
            raise ValueError("Cannot aggregate an empty play history")

        totals = self.totals(records)
        return Stats(
            top_song=self.top_song(records),
            top_artist=self.top_artist(records),
            top_album=self.top_album(records),
            top_genre=self.top_genre(records),
            total_ms=totals.total_ms,
            total_hours=totals.total_hours,
            total_days=totals.total_days,
            top_artists=self.top_artists(records),
            genre_distribution=self.genre_distribution(records),
            top_albums=self.top_albums(records),
            monthly_pattern=self.monthly_pattern(records),
        )

    def top_song(self, records: Sequence[PlayRecord]) -> RankedItem:
        """Most played (title, artist) pair"""
        return _first_ranked(
            rank_groups(records, _song_key),
            lambda song, count: RankedItem(name=song[0], sub_name=song[1], count=count),
        )

    def top_artist(self, records: Sequence[PlayRecord]) -> RankedItem:
        return _first_ranked(
            rank_groups(records, lambda record: record.artist),
            lambda artist, count: RankedItem(name=artist, count=count),
        )

    def top_album(self, records: Sequence[PlayRecord]) -> RankedItem:
        """Most played album; albums with the same title by different artists are distinct"""
        return _first_ranked(
            rank_groups(records, _album_key),
            lambda album, count: RankedItem(name=album[0], sub_name=album[1], count=count),
        )

    def top_genre(self, records: Sequence[PlayRecord]) -> RankedItem:
        """Most played genre, or the N/A sentinel when no play carries a genre"""
        return _first_ranked(
            rank_groups(_with_genre(records), lambda record: record.genre),
            lambda genre, count: RankedItem(name=genre, count=count),
        )

    def top_artists(self, records: Sequence[PlayRecord]) -> List[ChartItem]:
        ranked = rank_groups(records, lambda record: record.artist)
        return [ChartItem(label=artist, value=count) for artist, count in ranked[:TOP_N]]

    def genre_distribution(self, records: Sequence[PlayRecord]) -> List[ChartItem]:
        ranked = rank_groups(_with_genre(records), lambda record: record.genre)
        return [ChartItem(label=genre, value=count) for genre, count in ranked[:TOP_N]]

    def top_albums(self, records: Sequence[PlayRecord]) -> List[ChartItem]:
        """Top albums labelled "Album - Artist" so same-titled albums stay apart"""
        ranked = rank_groups(records, _album_key)
        return [
            ChartItem(label=f"{album} - {artist}", value=count)
            for (album, artist), count in ranked[:TOP_N]
        ]

    def monthly_pattern(self, records: Sequence[PlayRecord]) -> List[ChartItem]:
        """
        Plays per calendar month, keyed by the leading "YYYY-MM" of played_at.

        Unlike the other charts this one is ordered chronologically rather
        than by count. Plays with a shorter played_at are skipped.
        """
        dated = [record for record in records if len(record.played_at) >= MONTH_KEY_LENGTH]
        ranked = rank_groups(dated, lambda record: record.played_at[:MONTH_KEY_LENGTH])
        chronological = sorted(ranked, key=lambda item: item[0])
        return [ChartItem(label=month, value=count) for month, count in chronological[:TOP_N]]

    def totals(self, records: Sequence[PlayRecord]) -> ListeningTotals:
        """Sum durations; a history without durations yields zero, not an error"""
        total_ms = sum(record.duration_ms for record in records)
        total_hours = total_ms / MS_PER_HOUR
        return ListeningTotals(
            total_ms=total_ms,
            total_hours=total_hours,
            total_days=total_hours / HOURS_PER_DAY,
        )

def aggregate_stats(records: Sequence[PlayRecord]) -> Stats:
    """Aggregate records into a Stats value"""
    return StatsAggregator().aggregate(records)
