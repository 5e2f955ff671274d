"""ReportResult model definition"""
from typing import Optional
from pydantic import BaseModel, Field

class ReportResult(BaseModel):
    """
    Outcome of one report generation run.

    Attributes:
        year: Year the report covers
        song_count: Number of plays found for the year
        generated: Whether an HTML file was written
        output_path: Path of the written report, None when nothing was written
        total_duration: Formatted listening time shown in the report
    """
    year: int = Field(description="Report year")
    song_count: int = Field(0, ge=0, description="Plays found for the year")
    generated: bool = False
    output_path: Optional[str] = None
    total_duration: Optional[str] = None
