"""Report generation: fetch, aggregate, render, write"""
import logging
from pathlib import Path

from play_history_report.config import Settings
from play_history_report.db import Database, db
from play_history_report.models.report import ReportResult
from play_history_report.renderer import format_duration, render_report
from play_history_report.services.storage import StorageService
from play_history_report.services.writer import ReportWriter
from play_history_report.stats import StatsAggregator

logger = logging.getLogger(__name__)

class ReportGenerator:
    """Generates the yearly play history report"""

    def __init__(self, settings: Settings, database: Database = db):
        """Validate settings and load the template"""
        if not settings.DATABASE_PATH:
            raise ValueError("DatabasePath not configured (set DATABASE_PATH or DatabasePath in appsettings.json)")
        if not Path(settings.DATABASE_PATH).is_file():
            raise FileNotFoundError(f"Database file not found: {settings.DATABASE_PATH}")

        template_file = settings.template_file
        if not template_file.is_file():
            raise FileNotFoundError(f"Template file not found: {template_file}")

        self.settings = settings
        self.database = database
        self.template = template_file.read_text(encoding='utf-8-sig')
        self.aggregator = StatsAggregator()
        self.writer = ReportWriter(settings.OUTPUT_DIR)
        logger.debug(f"Using template {template_file}")

    @property
    def database_path(self) -> str:
        return self.settings.DATABASE_PATH

    def generate(self, year: int) -> ReportResult:
        """Build and write the report for a year; nothing is written when no plays match"""
        logger.info(f"Fetching play history for {year}...")
        with self.database.session() as session:
            records = StorageService(session).fetch_year(year)

        if not records:
            logger.info(f"No plays recorded in {year}; skipping report")
            return ReportResult(year=year, song_count=0)

        stats = self.aggregator.aggregate(records)
        logger.info(
            f"Top song: {stats.top_song.name} by {stats.top_song.sub_name} ({stats.top_song.count} plays), "
            f"top artist: {stats.top_artist.name} ({stats.top_artist.count} plays)"
        )
        if not stats.has_duration:
            logger.info("No duration data found; listening time will be hidden")
        if not stats.has_genre:
            logger.info("No genre data found; genre charts will be hidden")

        html = render_report(self.template, year, records, stats)
        output_path = self.writer.write(year, html)

        return ReportResult(
            year=year,
            song_count=len(records),
            generated=True,
            output_path=str(output_path),
            total_duration=format_duration(stats),
        )
