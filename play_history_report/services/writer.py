"""Writes rendered reports to disk"""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

def report_filename(year: int) -> str:
    return f"PlayHistory_{year}.html"

class ReportWriter:
    """Thin adapter between the rendered HTML and the filesystem"""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def write(self, year: int, html: str) -> Path:
        """Write the report for a year, replacing any previous one"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / report_filename(year)
        try:
            output_path.write_text(html, encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to write report to {output_path}: {e}")
            raise
        logger.debug(f"Wrote {len(html)} characters to {output_path}")
        return output_path
