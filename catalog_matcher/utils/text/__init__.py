"""Text utilities.

Organized under:
- core/: normalization, tokenization
- matching/: similarity scoring
- utils/: quantity parsing
"""

from .core import looks_like_code, normalize_code, normalize_header, tokenize
from .matching import bigram_similarity, header_score
from .utils import ParsedQty, normalize_unit, parse_qty, strip_qty

__all__ = [
    # core
    "looks_like_code",
    "normalize_code",
    "normalize_header",
    "tokenize",
    # matching
    "bigram_similarity",
    "header_score",
    # quantity
    "ParsedQty",
    "normalize_unit",
    "parse_qty",
    "strip_qty",
]
