"""Similarity helpers."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


# header_score 가중치: 문자 bigram 유사도 vs 토큰 겹침 비율
BIGRAM_WEIGHT = 0.65
TOKEN_WEIGHT = 0.35


def _bigrams(text: str) -> list[str]:
    return [text[i : i + 2] for i in range(len(text) - 1)]


def bigram_similarity(a: str, b: str) -> float:
    """문자 bigram Dice 계수 (0~1).

    - 동일한(비어 있지 않은) 문자열 → 1.0
    - 한쪽이 비었거나 2글자 미만(bigram 없음) → 0.0
    - 교집합은 multiset 기준: 공통 bigram 인스턴스는 한 번씩만 소비됩니다.
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    a_pairs = _bigrams(a)
    b_pairs = _bigrams(b)
    if not a_pairs or not b_pairs:
        return 0.0

    intersection = sum((Counter(a_pairs) & Counter(b_pairs)).values())
    return (2.0 * intersection) / (len(a_pairs) + len(b_pairs))


def header_score(
    query: str,
    candidate: str,
    query_tokens: Sequence[str],
    candidate_tokens: Sequence[str],
) -> float:
    """정규화된 질의와 후보 header 의 점수 (0~1).

    토큰이 한쪽이라도 없으면 bigram 유사도만 사용하고,
    그 외에는 bigram 유사도와 (고유 질의 토큰 중 후보에 있는 비율)을 가중 평균합니다.
    """
    dice = bigram_similarity(query, candidate)
    if not query_tokens or not candidate_tokens:
        return dice

    unique_query = set(query_tokens)
    overlap = len(unique_query.intersection(candidate_tokens)) / len(unique_query)

    return BIGRAM_WEIGHT * dice + TOKEN_WEIGHT * overlap
