"""매칭 서비스 - 카탈로그 스냅샷 관리 및 배치 매칭"""
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from catalog_matcher.core.config import settings
from catalog_matcher.core.exceptions import CatalogNotLoadedException
from catalog_matcher.core.logging import logger
from catalog_matcher.engine.matcher import Matcher, MatchThresholds
from catalog_matcher.engine.result import MatchResult, MatchStatus
from catalog_matcher.schemas.catalog_schema import ProductRecord
from catalog_matcher.schemas.query_schema import QueryLine, normalize_items


@dataclass(frozen=True)
class ProcessedLine:
    """요청 라인 + 매칭 결과"""

    item: QueryLine
    match: MatchResult


@dataclass(frozen=True)
class MatchSummary:
    """배치 매칭 집계"""

    total: int = 0
    ok: int = 0
    review: int = 0
    not_found: int = 0


class MatchingService:
    """
    매칭 서비스 - 스냅샷 교체와 배치 매칭만 담당

    - 인덱스 구축/매칭은 Matcher
    - 카탈로그 갱신 시 새 Matcher 를 만들어 참조 한 번으로 교체
      (진행 중인 매칭은 이전 스냅샷을 계속 사용)
    """

    def __init__(self, thresholds: Optional[MatchThresholds] = None):
        self.thresholds = thresholds or settings.match_thresholds()
        self._matcher: Optional[Matcher] = None

    @property
    def matcher(self) -> Matcher:
        matcher = self._matcher
        if matcher is None:
            raise CatalogNotLoadedException()
        return matcher

    @property
    def is_loaded(self) -> bool:
        return self._matcher is not None

    def publish_catalog(self, records: Iterable[ProductRecord]) -> Matcher:
        """새 카탈로그 스냅샷 게시

        인덱스를 끝까지 만든 뒤에만 교체하므로 반쯤 만들어진 인덱스는 보이지 않습니다.
        """
        matcher = Matcher.from_records(records, self.thresholds)
        self._matcher = matcher
        logger.info(f"Catalog snapshot published: {len(matcher.index)} products")
        return matcher

    def match_lines(self, items: Iterable[Union[QueryLine, Mapping[str, Any]]]) -> list[ProcessedLine]:
        """요청 라인 배치 매칭 (한 배치는 한 스냅샷으로 처리)"""
        matcher = self.matcher
        lines = normalize_items(items)
        processed = [ProcessedLine(item=line, match=matcher.match(line)) for line in lines]

        summary = summarize(processed)
        logger.info(
            f"Matched {summary.total} lines: ok={summary.ok}, "
            f"review={summary.review}, not_found={summary.not_found}"
        )
        return processed


def summarize(processed: Iterable[ProcessedLine]) -> MatchSummary:
    """상태별 집계"""
    total = ok = review = not_found = 0
    for line in processed:
        total += 1
        if line.match.status == MatchStatus.OK:
            ok += 1
        elif line.match.status == MatchStatus.REVIEW:
            review += 1
        else:
            not_found += 1
    return MatchSummary(total=total, ok=ok, review=review, not_found=not_found)
