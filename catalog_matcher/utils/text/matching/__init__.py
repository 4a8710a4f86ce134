"""Matching package."""

from .similarity import bigram_similarity, header_score

__all__ = [
    "bigram_similarity",
    "header_score",
]
