import pytest

from play_history_report.models.play import ChartItem, RankedItem
from play_history_report.stats import StatsAggregator, aggregate_stats, rank_groups

from factories import record

def test_aggregate_scenario(scenario_records):
    stats = aggregate_stats(scenario_records)

    assert stats.top_song == RankedItem(name="Song A", sub_name="Artist X", count=3)
    assert stats.top_artist == RankedItem(name="Artist X", count=3)
    assert stats.top_album == RankedItem(name="Album 1", sub_name="Artist X", count=3)
    assert stats.top_genre == RankedItem(name="Rock", count=3)
    assert stats.total_ms == 700000
    assert stats.total_hours == pytest.approx(700000 / 3_600_000)
    assert stats.total_hours == pytest.approx(0.194, abs=1e-3)
    assert stats.total_days == pytest.approx(stats.total_hours / 24)
    assert stats.monthly_pattern == [ChartItem("2025-01", 3), ChartItem("2025-02", 1)]
    assert stats.top_artists == [ChartItem("Artist X", 3), ChartItem("Artist Y", 1)]
    assert stats.genre_distribution == [ChartItem("Rock", 3), ChartItem("Pop", 1)]
    assert stats.top_albums == [ChartItem("Album 1 - Artist X", 3), ChartItem("Album 2 - Artist Y", 1)]
    assert stats.has_duration
    assert stats.has_genre

def test_ties_keep_first_occurrence_order():
    records = [
        record("One", "Beta"),
        record("Two", "Alpha"),
        record("Three", "Alpha"),
        record("Four", "Beta"),
        record("Five", "Gamma"),
    ]
    ranked = StatsAggregator().top_artists(records)

    assert [item.label for item in ranked] == ["Beta", "Alpha", "Gamma"]
    assert StatsAggregator().top_artist(records).name == "Beta"

def test_top_song_tie_uses_first_seen_song():
    records = [record("Later", "X"), record("Earlier", "X"), record("Earlier", "X"), record("Later", "X")]

    assert StatsAggregator().top_song(records) == RankedItem(name="Later", sub_name="X", count=2)

def test_ranked_lists_are_capped_at_ten():
    records = []
    for index in range(12):
        records.extend([record(f"Song {index}", f"Artist {index}", f"Album {index}")] * (index + 1))
    stats = aggregate_stats(records)

    assert len(stats.top_artists) == 10
    assert len(stats.top_albums) == 10
    assert [item.label for item in stats.top_artists] == [f"Artist {i}" for i in range(11, 1, -1)]
    counts = [item.value for item in stats.top_artists]
    assert counts == sorted(counts, reverse=True)

def test_short_lists_are_not_padded(scenario_records):
    stats = aggregate_stats(scenario_records)

    assert len(stats.top_artists) == 2
    assert len(stats.monthly_pattern) == 2

def test_missing_genre_yields_sentinel():
    records = [record("A", "X", genre=""), record("B", "Y", genre="")]
    stats = aggregate_stats(records)

    assert stats.top_genre == RankedItem(name="N/A", sub_name="", count=0)
    assert stats.genre_distribution == []
    assert not stats.has_genre

def test_records_without_genre_do_not_form_a_group():
    records = [record("A", "X", genre=""), record("B", "X", genre=""), record("C", "Y", genre="Folk")]
    stats = aggregate_stats(records)

    assert stats.top_genre == RankedItem(name="Folk", count=1)
    assert stats.genre_distribution == [ChartItem("Folk", 1)]

def test_album_groups_include_artist():
    records = [
        record("A", "First", album="Greatest Hits"),
        record("B", "Second", album="Greatest Hits"),
        record("C", "Second", album="Greatest Hits"),
    ]
    stats = aggregate_stats(records)

    assert stats.top_album == RankedItem(name="Greatest Hits", sub_name="Second", count=2)
    assert [item.label for item in stats.top_albums] == ["Greatest Hits - Second", "Greatest Hits - First"]

def test_monthly_pattern_is_chronological_and_skips_short_dates():
    records = [
        record("A", "X", played_at="2025-03-01"),
        record("B", "X", played_at="2025-03-02"),
        record("C", "X", played_at="2025-01-15"),
        record("D", "X", played_at="2025"),
        record("E", "X", played_at=""),
        record("F", "X", played_at="2025-02"),
    ]

    assert StatsAggregator().monthly_pattern(records) == [
        ChartItem("2025-01", 1),
        ChartItem("2025-02", 1),
        ChartItem("2025-03", 2),
    ]

def test_monthly_pattern_keeps_first_ten_months():
    records = [record("A", "X", played_at=f"2025-{month:02d}-01") for month in range(12, 0, -1)]
    pattern = StatsAggregator().monthly_pattern(records)

    assert [item.label for item in pattern] == [f"2025-{month:02d}" for month in range(1, 11)]

def test_totals_without_duration_are_zero():
    stats = aggregate_stats([record("A", "X"), record("B", "Y")])

    assert stats.total_ms == 0
    assert stats.total_hours == 0
    assert stats.total_days == 0
    assert not stats.has_duration

def test_totals_sum_large_durations_exactly():
    records = [record("A", "X", duration_ms=3_000_000_000)] * 1000
    totals = StatsAggregator().totals(records)

    assert totals.total_ms == 3_000_000_000_000
    assert totals.total_hours == pytest.approx(3_000_000_000_000 / 3_600_000)
    assert totals.total_days == pytest.approx(totals.total_hours / 24)

def test_totals_do_not_depend_on_order(scenario_records):
    forward = StatsAggregator().totals(scenario_records)
    backward = StatsAggregator().totals(list(reversed(scenario_records)))

    assert forward == backward

def test_empty_history_is_rejected():
    with pytest.raises(ValueError):
        aggregate_stats([])

def test_rank_groups_counts_by_key():
    records = [record("A", "X"), record("B", "Y"), record("C", "X")]

    assert rank_groups(records, lambda r: r.artist) == [("X", 2), ("Y", 1)]
