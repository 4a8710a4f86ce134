"""매칭 서비스 - export only."""

from .impl import (
    EXPORT_COLUMNS,
    MatchingService,
    MatchSummary,
    ProcessedLine,
    build_export_row,
    build_export_rows,
    summarize,
)

__all__ = [
    "EXPORT_COLUMNS",
    "MatchingService",
    "MatchSummary",
    "ProcessedLine",
    "build_export_row",
    "build_export_rows",
    "summarize",
]
