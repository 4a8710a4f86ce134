"""요청 라인(QueryLine) 스키마"""
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, Field, model_validator

from catalog_matcher.utils.text import normalize_header, parse_qty, strip_qty


class ItemSource(str, Enum):
    """요청 라인 출처"""

    EMAIL_TEXT = "email_text"
    EMAIL_HTML_TABLE = "email_html_table"
    XLSX = "xlsx"
    PDF = "pdf"


class QueryLine(BaseModel):
    """추출 파이프라인이 넘겨준 요청 한 줄

    normalized_name_or_code 를 주지 않으면 name_or_code(없으면 raw_line)로 계산합니다.
    """

    line_no: int = Field(0, ge=0, description="원문 내 라인 번호")
    source: Optional[ItemSource] = Field(None, description="출처 태그")
    raw_line: str = Field(..., description="원문 라인")
    name_or_code: Optional[str] = Field(None, description="상품명 또는 코드 후보")
    qty: Optional[float] = Field(None, description="수량")
    unit: Optional[str] = Field(None, description="단위")
    normalized_name_or_code: str = Field("", description="정규화된 name_or_code/raw_line")
    meta: dict[str, Any] = Field(default_factory=dict, description="추출기 메타데이터")

    @model_validator(mode="after")
    def _fill_normalized(self) -> "QueryLine":
        if not self.normalized_name_or_code:
            self.normalized_name_or_code = normalize_header(self.name_or_code or self.raw_line)
        return self

    @property
    def query_text(self) -> str:
        """매칭에 쓸 원문 (name_or_code 우선, 비어 있으면 raw_line)"""
        return self.name_or_code or self.raw_line

    @classmethod
    def from_raw_line(
        cls,
        raw_line: str,
        line_no: int = 0,
        source: Optional[ItemSource] = None,
    ) -> "QueryLine":
        """원문 한 줄에서 수량/단위를 뽑고 나머지를 name_or_code 로 사용

        예: "Кабель ВВГнг 3x2.5 100 м" -> name_or_code="Кабель ВВГнг 3x2.5", qty=100.0, unit="м"
        """
        compact = " ".join(raw_line.split())
        parsed = parse_qty(compact)
        name = strip_qty(compact, parsed)

        return cls(
            line_no=line_no,
            source=source,
            raw_line=compact,
            name_or_code=name if len(name) > 1 else compact,
            qty=parsed.qty,
            unit=parsed.unit,
            meta={"qty_raw": parsed.qty_raw},
        )


def normalize_items(items: Iterable[Union[QueryLine, Mapping[str, Any]]]) -> list[QueryLine]:
    """추출 결과(dict 또는 QueryLine)를 정규화 형태가 채워진 QueryLine 목록으로 변환"""
    lines: list[QueryLine] = []
    for item in items:
        if isinstance(item, QueryLine):
            lines.append(item)
        else:
            lines.append(QueryLine.model_validate(dict(item)))
    return lines
