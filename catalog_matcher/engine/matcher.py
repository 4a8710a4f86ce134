"""Matcher - cascading catalog match (CODE -> HEADER -> FUZZY)

단계 구조:
1. CODE: 코드처럼 보이면 정규화 코드로 정확 조회
2. HEADER: 정규화 header 로 정확 조회
3. FUZZY: 토큰으로 후보를 모은 뒤 bigram + 토큰 겹침 점수로 순위
4. 수량 보정: 수량이 없거나 0 이하면 OK 를 REVIEW 로 강등

각 단계는 결과가 정해지면 바로 반환합니다 (0건이면 다음 단계로).
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence

from catalog_matcher.core.logging import logger, sanitize_for_log
from catalog_matcher.engine.index import ProductIndex, build_product_index
from catalog_matcher.engine.result import (
    MatchCandidate,
    MatchProduct,
    MatchReason,
    MatchResult,
    MatchStatus,
)
from catalog_matcher.schemas.catalog_schema import ProductRecord
from catalog_matcher.schemas.query_schema import QueryLine
from catalog_matcher.utils.text import (
    header_score,
    looks_like_code,
    normalize_code,
    normalize_header,
    tokenize,
)


MAX_CANDIDATES = 5

# 토큰 후보가 0건일 때 훑어볼 상한 (best-effort, 완전성 보장 없음)
FALLBACK_SAMPLE_LIMIT = 1500

CODE_UNIQUE_CONFIDENCE = 0.99
CODE_AMBIGUOUS_CONFIDENCE = 0.8
HEADER_UNIQUE_CONFIDENCE = 0.95
HEADER_AMBIGUOUS_CONFIDENCE = 0.78

# 수량이 없을 때 OK 결과의 confidence 상한
MISSING_QTY_CONFIDENCE_CAP = 0.7


@dataclass(frozen=True)
class MatchThresholds:
    """FUZZY 단계 판정 임계값"""

    ok: float = 0.90  # 이 점수 이상 + gap 충족 → OK
    review: float = 0.72  # 이 점수 이상 → REVIEW
    gap: float = 0.08  # 1위 - 2위 최소 차이

    def __post_init__(self):
        """설정 검증"""
        for name in ("ok", "review", "gap"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"threshold '{name}' must be within [0, 1] (got {value})")
        if self.review > self.ok:
            raise ValueError(
                f"review threshold ({self.review}) must not exceed ok threshold ({self.ok})"
            )


class Matcher:
    """카탈로그 매처

    인덱스 스냅샷 하나에 묶여 있으며 생성 후에는 상태가 바뀌지 않으므로
    여러 스레드에서 동시에 match() 를 호출해도 됩니다.
    카탈로그가 바뀌면 새 Matcher 를 만듭니다.

    Usage:
        matcher = Matcher.from_records(products)
        result = matcher.match(QueryLine(raw_line="ELC0100203802 2 шт", name_or_code="ELC0100203802", qty=2))
    """

    def __init__(self, index: ProductIndex, thresholds: Optional[MatchThresholds] = None):
        self.index = index
        self.thresholds = thresholds or MatchThresholds()

    @classmethod
    def from_records(
        cls,
        records: Iterable[ProductRecord],
        thresholds: Optional[MatchThresholds] = None,
    ) -> "Matcher":
        return cls(build_product_index(records), thresholds)

    def match(self, line: QueryLine) -> MatchResult:
        """요청 한 줄 매칭"""
        result = self._match_cascade(line)

        if result.status == MatchStatus.OK and (line.qty is None or line.qty <= 0):
            logger.debug(f"Missing qty, downgrading to REVIEW: {sanitize_for_log(line.raw_line)}")
            result = replace(
                result,
                status=MatchStatus.REVIEW,
                confidence=min(result.confidence, MISSING_QTY_CONFIDENCE_CAP),
            )

        return result

    def match_many(self, lines: Iterable[QueryLine]) -> list[MatchResult]:
        return [self.match(line) for line in lines]

    # ========== 단계별 ==========

    def _match_cascade(self, line: QueryLine) -> MatchResult:
        query_text = line.query_text
        normalized = line.normalized_name_or_code or normalize_header(line.raw_line)

        if looks_like_code(query_text):
            code = normalize_code(query_text)
            by_code = self.index.lookup_code(code) if code else ()
            if by_code:
                return self._exact_result(
                    by_code, MatchReason.CODE, CODE_UNIQUE_CONFIDENCE, CODE_AMBIGUOUS_CONFIDENCE
                )

        # 정규화 후 빈 문자열("???" 등)은 header 조인 키로 쓰지 않음
        by_header = self.index.lookup_header(normalized) if normalized else ()
        if by_header:
            return self._exact_result(
                by_header, MatchReason.HEADER, HEADER_UNIQUE_CONFIDENCE, HEADER_AMBIGUOUS_CONFIDENCE
            )

        return self._fuzzy_result(normalized)

    @staticmethod
    def _exact_result(
        records: Sequence[ProductRecord],
        reason: MatchReason,
        unique_confidence: float,
        ambiguous_confidence: float,
    ) -> MatchResult:
        if len(records) == 1:
            record = records[0]
            return MatchResult(
                status=MatchStatus.OK,
                confidence=unique_confidence,
                reason=reason,
                product=MatchProduct.from_record(record),
                candidates=(MatchCandidate.from_record(record, unique_confidence),),
            )

        # 동점은 추측하지 않고 사람에게 넘김
        return MatchResult(
            status=MatchStatus.REVIEW,
            confidence=ambiguous_confidence,
            reason=reason,
            product=None,
            candidates=tuple(
                MatchCandidate.from_record(r, ambiguous_confidence) for r in records[:MAX_CANDIDATES]
            ),
        )

    def _candidate_ids(self, query_tokens: Sequence[str]) -> list[int]:
        ids: dict[int, None] = {}
        for token in query_tokens:
            for pid in self.index.ids_for_token(token):
                ids[pid] = None

        if ids:
            return list(ids)

        sample: list[int] = []
        for pid in self.index.by_id:
            if len(sample) >= FALLBACK_SAMPLE_LIMIT:
                break
            sample.append(pid)
        return sample

    def rank_candidates(self, normalized_query: str) -> list[MatchCandidate]:
        """정규화된 질의에 대한 FUZZY 후보 상위 N개 (점수 내림차순, 동점은 카탈로그 순서)"""
        query_tokens = tokenize(normalized_query)
        position = self.index.position_by_id

        scored: list[tuple[float, int]] = []
        for pid in self._candidate_ids(query_tokens):
            score = header_score(
                normalized_query,
                self.index.normalized_header_by_id[pid],
                query_tokens,
                self.index.tokens_by_id[pid],
            )
            scored.append((score, pid))

        scored.sort(key=lambda item: (-item[0], position[item[1]]))
        return [
            MatchCandidate.from_record(self.index.by_id[pid], score)
            for score, pid in scored[:MAX_CANDIDATES]
        ]

    def _fuzzy_result(self, normalized_query: str) -> MatchResult:
        candidates = tuple(self.rank_candidates(normalized_query))
        if not candidates:
            return MatchResult(
                status=MatchStatus.NOT_FOUND,
                confidence=0.0,
                reason=MatchReason.NONE,
                product=None,
                candidates=(),
            )

        top1 = candidates[0]
        top2_score = candidates[1].score if len(candidates) > 1 else 0.0
        gap = top1.score - top2_score
        best = MatchProduct.from_record(self.index.by_id[top1.id])

        if top1.score >= self.thresholds.ok and gap >= self.thresholds.gap:
            return MatchResult(MatchStatus.OK, top1.score, MatchReason.FUZZY, best, candidates)

        if top1.score >= self.thresholds.review:
            # 최선 추정은 붙여서 검토자에게 전달
            return MatchResult(MatchStatus.REVIEW, top1.score, MatchReason.FUZZY, best, candidates)

        return MatchResult(MatchStatus.NOT_FOUND, top1.score, MatchReason.NONE, None, candidates)
