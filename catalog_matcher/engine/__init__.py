"""Engine Layer - Catalog Matching Engine

This package provides:
- ProductIndex / build_product_index: immutable catalog lookup structures
- Matcher: CODE -> HEADER -> FUZZY cascade with quantity override
- MatchThresholds: explicit FUZZY decision thresholds
- MatchResult / MatchCandidate / MatchProduct: standardized verdict format
"""

from .index import ProductIndex, build_product_index
from .matcher import MAX_CANDIDATES, Matcher, MatchThresholds
from .result import MatchCandidate, MatchProduct, MatchReason, MatchResult, MatchStatus

__all__ = [
    "ProductIndex",
    "build_product_index",
    "Matcher",
    "MatchThresholds",
    "MAX_CANDIDATES",
    "MatchCandidate",
    "MatchProduct",
    "MatchReason",
    "MatchResult",
    "MatchStatus",
]
