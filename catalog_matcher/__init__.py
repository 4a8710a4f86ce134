"""Catalog matching engine for procurement request lines."""

__version__ = "1.0.0"

from catalog_matcher.engine import (
    Matcher,
    MatchCandidate,
    MatchProduct,
    MatchReason,
    MatchResult,
    MatchStatus,
    MatchThresholds,
    ProductIndex,
    build_product_index,
)
from catalog_matcher.schemas import ItemSource, ProductRecord, QueryLine, load_product_records
from catalog_matcher.services import MatchingService, build_export_row

__all__ = [
    "__version__",
    "Matcher",
    "MatchCandidate",
    "MatchProduct",
    "MatchReason",
    "MatchResult",
    "MatchStatus",
    "MatchThresholds",
    "ProductIndex",
    "build_product_index",
    "ItemSource",
    "ProductRecord",
    "QueryLine",
    "load_product_records",
    "MatchingService",
    "build_export_row",
]
