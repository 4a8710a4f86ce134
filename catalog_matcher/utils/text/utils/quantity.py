"""Quantity extraction helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


_UNIT = r"(штук|шт|pcs|pc|метр|м\.?|kg|кг|уп\.?|компл\.?)"
_NUMBER = r"([0-9]{1,3}(?:[\s.,][0-9]{3})+|[0-9]+(?:[.,][0-9]+)?)"
_NOT_WORD_BEFORE = r"(?<![A-Za-zА-Яа-яЁё0-9.,])"
_NOT_WORD_AFTER = r"(?![A-Za-zА-Яа-яЁё0-9.,])"
_NOT_LETTER_AFTER = r"(?![A-Za-zА-Яа-яЁё])"

_QTY_WITH_UNIT_RE = re.compile(
    _NOT_WORD_BEFORE + _NUMBER + r"\s*" + _UNIT + _NOT_LETTER_AFTER, re.IGNORECASE
)
_QTY_BARE_RE = re.compile(_NOT_WORD_BEFORE + _NUMBER + _NOT_WORD_AFTER)
# 독립된 단위 단어만 (코드 일부인 "PC-123" 등은 제외)
_UNIT_WORD_RE = re.compile(r"(?<!\S)" + _UNIT + r"(?=[\s;,|]|$)", re.IGNORECASE)

_UNIT_ALIASES = {
    "шт": "шт",
    "штук": "шт",
    "pcs": "шт",
    "pc": "шт",
    "м": "м",
    "м.": "м",
    "метр": "м",
    "kg": "кг",
    "кг": "кг",
    "уп": "уп",
    "уп.": "уп",
}


@dataclass(frozen=True)
class ParsedQty:
    """요청 라인에서 뽑은 수량 정보"""

    qty: Optional[float] = None
    unit: Optional[str] = None
    qty_raw: Optional[str] = None  # 원문 조각 (예: "1 000 шт")


def normalize_unit(unit: str) -> str:
    """단위 표기 통일 (pcs → шт, метр → м 등)"""
    u = unit.lower()
    return _UNIT_ALIASES.get(u, u)


def _normalize_numeric_token(token: str) -> str:
    compact = re.sub(r"\s+", "", token)

    if re.fullmatch(r"[0-9]{1,3}(?:\.[0-9]{3})+", compact):
        return compact.replace(".", "")
    if re.fullmatch(r"[0-9]{1,3}(?:,[0-9]{3})+", compact):
        return compact.replace(",", "")
    if "," in compact and "." not in compact:
        return compact.replace(",", ".")
    return compact


def parse_qty(line: str) -> ParsedQty:
    """
    요청 라인에서 수량/단위 추출

    - 단위가 붙은 숫자 중 마지막 것을 우선 사용, 없으면 마지막 독립 숫자
    - 천 단위 구분자("1 000", "1.000", "1,000") 제거, 소수점 쉼표 허용

    예시:
    - "Кабель ВВГнг 3x2.5 100 м" -> qty=100.0, unit="м"
    - "Кабель 1 000 шт" -> qty=1000.0, unit="шт"
    - "Провод 1,5 м" -> qty=1.5, unit="м"
    """
    if not line:
        return ParsedQty()

    text = line.replace("\u00a0", " ")

    with_unit = list(_QTY_WITH_UNIT_RE.finditer(text))
    if with_unit:
        match = with_unit[-1]
        unit_source: Optional[str] = match.group(2)
    else:
        bare = list(_QTY_BARE_RE.finditer(text))
        match = bare[-1] if bare else None
        unit_match = _UNIT_WORD_RE.search(text)
        unit_source = unit_match.group(1) if unit_match else None

    unit = normalize_unit(unit_source) if unit_source else None
    if match is None:
        return ParsedQty(qty=None, unit=unit, qty_raw=None)

    try:
        qty: Optional[float] = float(_normalize_numeric_token(match.group(1)))
    except ValueError:
        qty = None

    return ParsedQty(qty=qty, unit=unit, qty_raw=match.group(0).strip())


def strip_qty(line: str, parsed: ParsedQty) -> str:
    """라인에서 수량 조각과 단위 단어를 제거한 나머지 (상품명/코드 후보)"""
    rest = line.replace("\u00a0", " ")
    if parsed.qty_raw:
        idx = rest.rfind(parsed.qty_raw)
        if idx >= 0:
            rest = f"{rest[:idx]} {rest[idx + len(parsed.qty_raw):]}"

    rest = _UNIT_WORD_RE.sub(" ", rest)
    rest = re.sub(r"[;|]+", " ", rest)
    return re.sub(r"\s+", " ", rest).strip()
