"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진 의존 없음
"""

from .catalog import (
    CATALOG_PAYLOADS,
    DUPLICATE_CODE_PAYLOADS,
    DUPLICATE_HEADER_PAYLOADS,
    INVALID_PAYLOADS,
)
from .query_lines import QUERY_LINES

__all__ = [
    "CATALOG_PAYLOADS",
    "DUPLICATE_CODE_PAYLOADS",
    "DUPLICATE_HEADER_PAYLOADS",
    "INVALID_PAYLOADS",
    "QUERY_LINES",
]
