"""Entry point for play history report generation"""
import json
import logging
import re
import sys
import traceback
from typing import List, Optional

from play_history_report.config import MAX_REPORT_YEAR, MIN_REPORT_YEAR, Settings, get_settings
from play_history_report.db import db
from play_history_report.report import ReportGenerator
from play_history_report.services.writer import report_filename

logger = logging.getLogger(__name__)

# Plain ASCII digits only; int() would also take "20_25" or full-width digits
YEAR_PATTERN = re.compile(r"\d{4}", re.ASCII)

def parse_year(value: str) -> Optional[int]:
    """Return the report year, or None when it is not an accepted year"""
    if not YEAR_PATTERN.fullmatch(value):
        return None
    year = int(value)
    if year < MIN_REPORT_YEAR or year > MAX_REPORT_YEAR:
        return None
    return year

def main(argv: Optional[List[str]] = None, app_settings: Optional[Settings] = None) -> int:
    """Generate the report for the year given on the command line and return the exit code."""
    args = sys.argv[1:] if argv is None else argv
    if app_settings is None:
        try:
            app_settings = get_settings()
        except ValueError as e:
            logging.basicConfig(format='%(message)s')
            logger.error(f"Invalid configuration: {e}")
            return 1

    logging.basicConfig(level=app_settings.LOG_LEVEL, format='%(message)s')

    if not args:
        logger.error("Usage: PlayHistoryReport <year>")
        logger.error(f"Example: PlayHistoryReport {MIN_REPORT_YEAR}")
        return 1

    year = parse_year(args[0])
    if year is None:
        logger.error(f"Invalid year: {args[0]}")
        return 1

    # Configuration problems are reported without a stack trace
    try:
        generator = ReportGenerator(app_settings, database=db)
    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    try:
        db.init(generator.database_path)

        logger.debug("Using configuration:")
        logger.debug(json.dumps(app_settings.model_dump(), indent=2))

        result = generator.generate(year)

    except Exception as e:
        logger.error(f"Error during report generation: {e}")
        traceback.print_exc()
        return 1
    finally:
        db.dispose()

    if not result.generated:
        logger.info(f"No songs found for year {year}")
        return 0

    logger.info(f"Generated {report_filename(year)} with {result.song_count} songs")
    logger.debug(json.dumps(result.model_dump(), indent=2))
    return 0

def run() -> None:
    """Console script entry point"""
    sys.exit(main())

if __name__ == "__main__":
    run()
