"""Services implementation package."""

from .export_rows import EXPORT_COLUMNS, build_export_row, build_export_rows
from .matching_service import MatchingService, MatchSummary, ProcessedLine, summarize

__all__ = [
    "EXPORT_COLUMNS",
    "build_export_row",
    "build_export_rows",
    "MatchingService",
    "MatchSummary",
    "ProcessedLine",
    "summarize",
]
