"""export 행 테스트"""

from __future__ import annotations

import pytest

from catalog_matcher.services import (
    EXPORT_COLUMNS,
    MatchingService,
    ProcessedLine,
    build_export_row,
    build_export_rows,
)
from tests.fixtures import QUERY_LINES


def test_columns_order(matcher, query_line):
    item = query_line("code_exact")
    row = build_export_row(item, matcher.match(item))

    assert tuple(row) == EXPORT_COLUMNS
    assert len(EXPORT_COLUMNS) == 21


def test_ok_row(matcher, query_line):
    item = query_line("code_exact")
    row = build_export_row(item, matcher.match(item))

    assert row["input_line_no"] == 1
    assert row["source"] == "email_text"
    assert row["raw_line"] == "ELC0100203802 2 шт"
    assert row["parsed_name_or_code"] == "ELC0100203802"
    assert row["parsed_qty"] == 2
    assert row["parsed_unit"] == "шт"
    assert row["match_status"] == "OK"
    assert row["confidence"] == pytest.approx(0.99)
    assert row["match_reason"] == "CODE"
    assert row["product_id"] == 1
    assert row["product_syncUid"] == "sync-1"
    assert row["product_header"] == "Кабель ВВГнг 3x2.5"
    assert row["product_articul"] == "ELC0100203802"
    assert row["unitHeader"] == "м"
    assert row["flat_manufacturer"] == "MNF-123"
    assert row["flat_elcom"] is None
    assert row["candidate2_header"] is None
    assert row["candidate2_score"] is None


def test_review_row_has_second_candidate(matcher, query_line):
    """감사용 2순위 후보"""
    item = query_line("fuzzy_ambiguous")
    row = build_export_row(item, matcher.match(item))

    assert row["match_status"] == "REVIEW"
    assert row["product_id"] == 2
    assert row["candidate2_header"] == "Кабель ВВГнг 3x2.5"
    assert row["candidate2_score"] == pytest.approx(0.65 * 28 / 31 + 0.35 * 2 / 3)


def test_not_found_row(matcher, query_line):
    item = query_line("unrelated")
    row = build_export_row(item, matcher.match(item))

    assert row["match_status"] == "NOT_FOUND"
    assert row["match_reason"] == "NONE"
    for column in ("product_id", "product_header", "product_articul", "unitHeader", "flat_etm"):
        assert row[column] is None


def test_source_missing(matcher, query_line):
    item = query_line("code_exact", source=None)
    assert build_export_row(item, matcher.match(item))["source"] is None


def test_build_export_rows(catalog_records):
    service = MatchingService()
    service.publish_catalog(catalog_records)
    rows = build_export_rows(service.match_lines(QUERY_LINES.values()))

    assert [r["input_line_no"] for r in rows] == [1, 2, 3, 4, 5]
    assert [r["match_status"] for r in rows] == ["OK", "REVIEW", "NOT_FOUND", "OK", "OK"]


def test_build_export_rows_from_generator(matcher, query_line):
    """ProcessedLine 이터러블(제너레이터)도 입력 가능"""
    items = [query_line("code_exact"), query_line("unrelated")]
    rows = build_export_rows(ProcessedLine(item=item, match=matcher.match(item)) for item in items)

    assert [r["match_status"] for r in rows] == ["OK", "NOT_FOUND"]
