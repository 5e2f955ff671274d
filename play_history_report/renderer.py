"""HTML report rendering by placeholder substitution"""
import logging
import re
from typing import Dict, Optional, Sequence

from play_history_report.models.play import PlayRecord, Stats
from play_history_report.utils.json_encoder import json_array

logger = logging.getLogger(__name__)

# {{name}} tokens; anything else in the template is copied verbatim
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

SONG_ROW = """        <tr>
            <td>{title}</td>
            <td>{artist}</td>
            <td>{album}</td>
            <td>{played_at}</td>
        </tr>"""

def html_encode(text: Optional[str]) -> str:
    """Escape text for HTML; the ampersand goes first so entities are not escaped twice"""
    if not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )

def format_duration(stats: Stats) -> str:
    """Render listening time as days and hours once it reaches a full day"""
    if stats.total_hours >= 24:
        return f"{stats.total_days:.1f} days ({stats.total_hours:.0f} hours)"
    return f"{stats.total_hours:.1f} hours"

def _flag(value: bool) -> str:
    return "true" if value else "false"

def render_song_rows(records: Sequence[PlayRecord]) -> str:
    """One table row per play, in the order the records were supplied"""
    return "\n".join(
        SONG_ROW.format(
            title=html_encode(record.title),
            artist=html_encode(record.artist),
            album=html_encode(record.album),
            played_at=html_encode(record.played_at),
        )
        for record in records
    )

def build_replacements(year: int, records: Sequence[PlayRecord], stats: Stats) -> Dict[str, str]:
    """Map every template placeholder name to its substituted text"""
    return {
        "year": str(year),
        "songCount": str(len(records)),
        "songRows": render_song_rows(records),
        "topSongTitle": html_encode(stats.top_song.name),
        "topSongArtist": html_encode(stats.top_song.sub_name),
        "topSongCount": str(stats.top_song.count),
        "topArtistName": html_encode(stats.top_artist.name),
        "topArtistCount": str(stats.top_artist.count),
        "topAlbumTitle": html_encode(stats.top_album.name),
        "topAlbumArtist": html_encode(stats.top_album.sub_name),
        "topAlbumCount": str(stats.top_album.count),
        "topGenreName": html_encode(stats.top_genre.name),
        "topGenreCount": str(stats.top_genre.count),
        "totalDuration": format_duration(stats),
        "hasDuration": _flag(stats.has_duration),
        "hasGenre": _flag(stats.has_genre),
        "artistLabels": json_array(item.label for item in stats.top_artists),
        "artistData": json_array(item.value for item in stats.top_artists),
        "genreLabels": json_array(item.label for item in stats.genre_distribution),
        "genreData": json_array(item.value for item in stats.genre_distribution),
        "albumLabels": json_array(item.label for item in stats.top_albums),
        "albumData": json_array(item.value for item in stats.top_albums),
        "monthLabels": json_array(item.label for item in stats.monthly_pattern),
        "monthData": json_array(item.value for item in stats.monthly_pattern),
    }

def substitute(template: str, replacements: Dict[str, str]) -> str:
    """
    Replace {{name}} tokens in a single pass.

    Unknown tokens are left in place, and text produced by a replacement is
    never scanned again, so a song titled "{{year}}" is printed as written.
    """
    def _replace(match):
        name = match.group(1)
        return replacements.get(name, match.group(0))

    return PLACEHOLDER_PATTERN.sub(_replace, template)

def render_report(template: str, year: int, records: Sequence[PlayRecord], stats: Stats) -> str:
    """Compose the final HTML document"""
    replacements = build_replacements(year, records, stats)
    missing = [name for name in replacements if f"{{{{{name}}}}}" not in template]
    if missing:
        logger.debug(f"Template does not use placeholders: {', '.join(missing)}")
    return substitute(template, replacements)
