"""Tokenization utilities for matching."""

from __future__ import annotations

from .cleaning import normalize_header


MIN_TOKEN_LENGTH = 2


def tokenize(text: str) -> list[str]:
    """매칭용 토큰화.

    normalize_header 결과를 공백으로 나누고 2글자 미만 토큰은 버립니다.
    순서는 등장 순서 그대로이고 중복도 유지합니다 (집합이 필요하면 호출 측에서 제거).
    """
    if not text:
        return []

    return [t for t in normalize_header(text).split(" ") if len(t) >= MIN_TOKEN_LENGTH]
