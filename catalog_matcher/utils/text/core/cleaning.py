"""Text cleaning helpers.

헤더/코드 정규화 결과는 인덱스 구축과 질의 양쪽에서 조인 키로 쓰이므로
두 함수 모두 멱등이어야 합니다: f(f(s)) == f(s).
"""

from __future__ import annotations

import re


# 곱셈 기호 변형: ×, x, х(키릴), * → X  (대문자화 이후에 적용)
_MULTIPLY_RE = re.compile(r"[×XХ*]")

# 면적 단위 표기: мм², mm², кв. мм, кв мм, квмм, mm2, мм2 → MM2
# 연달아 붙은 "КВ" 접두는 한 번에 접음
_AREA_UNIT_RE = re.compile(r"(?:КВ\.?\s*)+(?:ММ|MM)[²2]?|(?:ММ|MM)[²2]")

_QUOTES_RE = re.compile(r"[\"'`«»„“”]")
_HEADER_DISALLOWED_RE = re.compile(r"[^A-ZА-Я0-9\-/\s.]")
_CODE_DISALLOWED_RE = re.compile(r"[^A-ZА-Я0-9\-_/]")
_WHITESPACE_RE = re.compile(r"\s+")

_LATIN_LETTER_RE = re.compile(r"[A-Za-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_CODE_SHAPE_RE = re.compile(r"[A-Za-zА-Яа-яЁё0-9\-_/.\s]{3,}")


def _fold_area_units(text: str) -> str:
    return _AREA_UNIT_RE.sub("MM2", text)


def normalize_header(text: str) -> str:
    """
    상품명(header)을 비교 가능한 형태로 정규화

    예시:
    - "Кабель ВВГнг 3х2,5" -> "КАБЕЛЬ ВВГНГ 3X2 5"
    - "Провод ПуГВ 6 мм²" -> "ПРОВОД ПУГВ 6 MM2"
    - "Лампа «Ёлка»" -> "ЛАМПА ЕЛКА"

    Args:
        text: 원본 문자열

    Returns:
        정규화된 문자열 (빈 입력이면 "")
    """
    if not text:
        return ""

    normalized = text.upper().replace("Ё", "Е")
    normalized = _MULTIPLY_RE.sub("X", normalized)
    # ² 는 아래 문자 필터에서 사라지므로 먼저 한 번 접습니다
    normalized = _fold_area_units(normalized)
    normalized = _QUOTES_RE.sub(" ", normalized)
    normalized = _HEADER_DISALLOWED_RE.sub(" ", normalized)
    # 필터가 구두점을 공백으로 바꾸며 새로 생긴 "КВ ММ" 류를 다시 접음 (멱등성)
    normalized = _fold_area_units(normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized)

    return normalized.strip()


def normalize_code(text: str) -> str:
    """
    상품 코드(артикул, 아날로그 코드 등)를 비교 가능한 형태로 정규화

    - 대문자화, 모든 공백 제거
    - 곱셈 기호 변형은 X 로 통일
    - 영문/키릴 문자, 숫자, '-', '_', '/' 외에는 제거

    예: " elc 0100-2038/02 " -> "ELC0100-2038/02"
    """
    if not text:
        return ""

    normalized = _WHITESPACE_RE.sub("", text.upper())
    normalized = _MULTIPLY_RE.sub("X", normalized)
    return _CODE_DISALLOWED_RE.sub("", normalized)


def looks_like_code(text: str) -> bool:
    """코드처럼 보이는지 판단 (코드 조회를 먼저 시도할지 결정)

    영문자 1개 이상 + 숫자 1개 이상, 허용 문자만으로 구성, 길이 3 이상.
    """
    if not text:
        return False

    trimmed = text.strip()
    return (
        _LATIN_LETTER_RE.search(trimmed) is not None
        and _DIGIT_RE.search(trimmed) is not None
        and _CODE_SHAPE_RE.fullmatch(trimmed) is not None
    )
