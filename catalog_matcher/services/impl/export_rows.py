"""Export row projection.

Renders one flat row per processed line for the spreadsheet exporter.
Column names are the exporter's contract and must not be renamed.
"""

from __future__ import annotations

from typing import Any, Iterable

from catalog_matcher.engine.result import MatchResult
from catalog_matcher.schemas.catalog_schema import FLAT_CODE_FIELDS
from catalog_matcher.schemas.query_schema import QueryLine
from catalog_matcher.services.impl.matching_service import ProcessedLine


EXPORT_COLUMNS = (
    "input_line_no",
    "source",
    "raw_line",
    "parsed_name_or_code",
    "parsed_qty",
    "parsed_unit",
    "match_status",
    "confidence",
    "match_reason",
    "product_id",
    "product_syncUid",
    "product_header",
    "product_articul",
    "unitHeader",
    "flat_elcom",
    "flat_manufacturer",
    "flat_raec",
    "flat_pc",
    "flat_etm",
    "candidate2_header",
    "candidate2_score",
)


def build_export_row(item: QueryLine, match: MatchResult) -> dict[str, Any]:
    """요청 라인 + 매칭 결과 → export 행 (EXPORT_COLUMNS 순서)"""
    product = match.product
    flat_codes = product.flat_codes if product else {}
    second = match.second_candidate

    row: dict[str, Any] = {
        "input_line_no": item.line_no,
        "source": item.source.value if item.source else None,
        "raw_line": item.raw_line,
        "parsed_name_or_code": item.name_or_code,
        "parsed_qty": item.qty,
        "parsed_unit": item.unit,
        "match_status": match.status.value,
        "confidence": match.confidence,
        "match_reason": match.reason.value,
        "product_id": product.id if product else None,
        "product_syncUid": product.sync_uid if product else None,
        "product_header": product.header if product else None,
        "product_articul": product.articul if product else None,
        "unitHeader": product.unit_header if product else None,
    }
    for name in FLAT_CODE_FIELDS:
        row[f"flat_{name}"] = flat_codes.get(name)
    row["candidate2_header"] = second.header if second else None
    row["candidate2_score"] = second.score if second else None

    return {column: row[column] for column in EXPORT_COLUMNS}


def build_export_rows(processed: Iterable[ProcessedLine]) -> list[dict[str, Any]]:
    """ProcessedLine 목록 → export 행 목록"""
    return [build_export_row(line.item, line.match) for line in processed]
