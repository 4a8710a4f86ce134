"""Core text processing (normalization, tokenization)."""

from .cleaning import looks_like_code, normalize_code, normalize_header
from .tokenize import tokenize

__all__ = [
    "looks_like_code",
    "normalize_code",
    "normalize_header",
    "tokenize",
]
