"""Match Result - Standardized Result Format

Provides the verdict format returned for every query line, whatever stage
of the cascade resolved it.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from catalog_matcher.schemas.catalog_schema import ProductRecord


class MatchStatus(str, Enum):
    """매칭 판정"""

    OK = "OK"  # 자동 확정
    REVIEW = "REVIEW"  # 사람 검토 필요 (모호함/점수 부족/수량 없음)
    NOT_FOUND = "NOT_FOUND"  # 해당 상품 없음


class MatchReason(str, Enum):
    """판정을 만든 단계"""

    CODE = "CODE"
    HEADER = "HEADER"
    FUZZY = "FUZZY"
    NONE = "NONE"


@dataclass(frozen=True)
class MatchCandidate:
    """후보 상품"""

    id: int
    sync_uid: Optional[str]
    header: str
    score: float

    @classmethod
    def from_record(cls, record: ProductRecord, score: float) -> "MatchCandidate":
        return cls(id=record.id, sync_uid=record.sync_uid, header=record.header, score=score)


@dataclass(frozen=True)
class MatchProduct:
    """확정(또는 최선 추정) 상품 projection"""

    id: int
    sync_uid: Optional[str]
    header: str
    articul: Optional[str]
    unit_header: Optional[str]
    flat_codes: dict[str, Optional[str]] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: ProductRecord) -> "MatchProduct":
        return cls(
            id=record.id,
            sync_uid=record.sync_uid,
            header=record.header,
            articul=record.articul,
            unit_header=record.unit_header,
            flat_codes=record.flat_codes.model_dump(),
        )


@dataclass(frozen=True)
class MatchResult:
    """매칭 결과 표준 포맷

    Attributes:
        status: OK | REVIEW | NOT_FOUND
        confidence: 0~1
        reason: CODE | HEADER | FUZZY | NONE
        product: 확정 상품 (코드/헤더 동점 REVIEW 에서는 None)
        candidates: 점수 내림차순 후보 (최대 5개)
    """

    status: MatchStatus
    confidence: float
    reason: MatchReason
    product: Optional[MatchProduct] = None
    candidates: tuple[MatchCandidate, ...] = ()

    @property
    def is_ok(self) -> bool:
        return self.status == MatchStatus.OK

    @property
    def needs_review(self) -> bool:
        return self.status == MatchStatus.REVIEW

    @property
    def second_candidate(self) -> Optional[MatchCandidate]:
        """감사(audit)용 2순위 후보"""
        return self.candidates[1] if len(self.candidates) > 1 else None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["reason"] = self.reason.value
        data["candidates"] = list(data["candidates"])
        return data
